"""
Configuration for block extraction.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from hother.titleblocks.core.models import BlockDefinition

DEFAULT_CONFIG_KEY = "titleblocks.block_definitions"

DEFAULT_BLOCK_DEFINITIONS: tuple[tuple[str, str], ...] = (
    ("[", "]"),
    ("(", ")"),
    ("{", "}"),
)


class TitleBlocksConfig(BaseModel):
    """Ordered block definitions used by the analyser."""

    model_config = ConfigDict(frozen=True)

    block_definitions: list[BlockDefinition] = Field(
        default_factory=lambda: [BlockDefinition(delimiters=pair) for pair in DEFAULT_BLOCK_DEFINITIONS],
        description="Definitions in extraction order",
    )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], key: str = DEFAULT_CONFIG_KEY) -> "TitleBlocksConfig":
        """
        Load the definitions stored under a dotted key of a nested mapping.

        Args:
            mapping: Configuration mapping, e.g. parsed from TOML or JSON
            key: Dotted path of the definition list

        Returns:
            Configuration with the stored definitions, or the defaults if the key is missing
        """
        node: Any = mapping
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return cls()
            node = node[part]

        return cls(block_definitions=node)
