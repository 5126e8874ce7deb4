"""
Core models for the block extraction system.
"""

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BlockDefinition(BaseModel):
    """
    Delimiters demarcating a block, as configured.

    The delimiters are kept as given so that malformed definitions (not a
    pair, mixed characters, bare strings, non-string delimiters) survive
    configuration and are rejected by the validator at extraction time.
    """

    model_config = ConfigDict(frozen=True)

    delimiters: tuple[Any, ...] = Field(..., description="Start and end delimiters")

    @model_validator(mode="before")
    @classmethod
    def _coerce_sequence(cls, data: Any) -> Any:
        if isinstance(data, BlockDefinition):
            return data
        if isinstance(data, dict) and "delimiters" in data:
            data = data["delimiters"]
        if isinstance(data, (list, tuple)):
            return {"delimiters": tuple(data)}
        # A lone value is a one-delimiter definition, rejected on arity
        return {"delimiters": (data,)}

    @classmethod
    def of(cls, *delimiters: str) -> "BlockDefinition":
        """Build a definition from positional delimiters."""
        return cls(delimiters=delimiters)

    @property
    def arity(self) -> int:
        return len(self.delimiters)

    @property
    def start(self) -> str:
        return self.delimiters[0]

    @property
    def end(self) -> str:
        return self.delimiters[-1]

    def __str__(self) -> str:
        return " ".join(map(str, self.delimiters))


class DefinitionStatus(str, Enum):
    """Outcome of checking a definition against a source string."""

    PRESENT = "present"
    ABSENT = "absent"
    INVALID = "invalid"
    UNBALANCED = "unbalanced"


class DefinitionCheck(BaseModel):
    """Result of validating a definition and checking its balance in a source."""

    model_config = ConfigDict(frozen=True)

    definition: BlockDefinition
    status: DefinitionStatus
    start_count: int = Field(default=0, ge=0)
    end_count: int = Field(default=0, ge=0)
    reason: str | None = Field(default=None, description="Why the definition is skipped")

    @property
    def should_extract(self) -> bool:
        """Whether the definition can contribute blocks."""
        return self.status is DefinitionStatus.PRESENT

    def log_context(self) -> dict[str, Any]:
        """Get context dict for structured logging."""
        return {
            "definition": str(self.definition),
            "status": self.status.value,
            "start_count": self.start_count,
            "end_count": self.end_count,
            "reason": self.reason,
        }


class Block(BaseModel):
    """A block that has been extracted from a source string."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="Text between the delimiters")
    definition: BlockDefinition = Field(..., description="Definition that produced the block")

    @property
    def raw_block(self) -> str:
        """The delimited text exactly as it appeared in the source."""
        return f"{self.definition.start}{self.content}{self.definition.end}"

    def __str__(self) -> str:
        return self.content

    def log_context(self) -> dict[str, Any]:
        """Get context dict for structured logging."""
        return {
            "content": self.content,
            "definition": str(self.definition),
            "raw_length": len(self.raw_block),
        }


def unique_by_content(blocks: Iterable[Block]) -> list[Block]:
    """Drop blocks whose content was already seen, keeping first-seen order."""
    seen: set[str] = set()
    distinct: list[Block] = []
    for block in blocks:
        if block.content in seen:
            continue
        seen.add(block.content)
        distinct.append(block)
    return distinct


class ParserResult(BaseModel):
    """Outcome of parsing one source string."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="Trimmed source string")
    blocks: list[Block] = Field(default_factory=list, description="Blocks in extraction order")
    raw_blocks: list[str] = Field(default_factory=list, description="Raw delimited text of each block")
    clean_source: str = Field(default="", description="Source with blocks removed")

    @property
    def contents(self) -> list[str]:
        return [block.content for block in self.blocks]

    @property
    def distinct_blocks(self) -> list[Block]:
        return unique_by_content(self.blocks)

    def log_context(self) -> dict[str, Any]:
        """Get context dict for structured logging."""
        return {
            "source_length": len(self.source),
            "block_count": len(self.blocks),
            "distinct_count": len(self.distinct_blocks),
            "clean_length": len(self.clean_source),
        }


def as_definitions(items: Iterable[BlockDefinition | Sequence[str]]) -> list[BlockDefinition]:
    """Coerce raw delimiter sequences into definitions, preserving order."""
    return [BlockDefinition.model_validate(item) for item in items]
