"""
String analyser caching extracted blocks and the cleaned string.
"""

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from hother.titleblocks.utils.logging import get_logger

from .deblock import deblock
from .extraction import BlockExtractor
from .factory import BaseBlockFactory, ParserResultFactory
from .models import Block, BlockDefinition, ParserResult, unique_by_content

if TYPE_CHECKING:
    from hother.titleblocks.config import TitleBlocksConfig

logger = get_logger(__name__)


class AnalyserState(BaseModel):
    """Source string and the results cached for it."""

    model_config = ConfigDict(validate_assignment=True)

    source: str = Field(default="", description="Trimmed source string")
    blocks: list[Block] | None = Field(default=None, description="Cached block list")
    clean_string: str | None = Field(default=None, description="Cached clean string")

    @property
    def is_cached(self) -> bool:
        return self.blocks is not None or self.clean_string is not None

    def reset(self) -> None:
        """Drop both cached results."""
        self.blocks = None
        self.clean_string = None


class StringAnalyser:
    """
    Extracts blocks from a source string and produces its clean form.

    Results are computed lazily and cached until the source string changes
    or a fresh computation is requested. An instance is meant to be used by
    one caller at a time.
    """

    def __init__(
        self,
        definitions: Iterable[BlockDefinition | Sequence[str]] | None = None,
        block_factory: BaseBlockFactory | None = None,
        result_factory: ParserResultFactory | None = None,
    ):
        """
        Initialize string analyser.

        Args:
            definitions: Ordered block definitions (default: the configured defaults)
            block_factory: Factory materializing blocks
            result_factory: Factory assembling parse results
        """
        if definitions is None:
            from hother.titleblocks.config import TitleBlocksConfig

            definitions = TitleBlocksConfig().block_definitions

        self.extractor = BlockExtractor(definitions, block_factory)
        self.result_factory = result_factory or ParserResultFactory()
        self.state = AnalyserState()

    @classmethod
    def from_config(cls, config: "TitleBlocksConfig", **kwargs) -> "StringAnalyser":
        """Create an analyser using the definitions of a configuration."""
        return cls(config.block_definitions, **kwargs)

    @property
    def source_string(self) -> str:
        return self.state.source

    @source_string.setter
    def source_string(self, value: str) -> None:
        self.state.source = value.strip()
        self.state.reset()

    def set_source_string(self, value: str) -> "StringAnalyser":
        """Replace the source string and return the analyser for chaining."""
        self.source_string = value
        return self

    def reset(self) -> None:
        """Drop cached results for the current source string."""
        self.state.reset()

    def get_blocks(self, fresh: bool = False) -> list[Block]:
        """
        Get the blocks of the source string.

        Args:
            fresh: Recompute and overwrite the cache

        Raises:
            BlockDefinitionExtractionError: If the pattern engine fails
        """
        if fresh or self.state.blocks is None:
            self.state.blocks = self.extractor.extract_all(self.state.source)
        return list(self.state.blocks)

    def get_clean_string(self, fresh: bool = False) -> str:
        """
        Get the source string with its blocks removed.

        A fresh clean string still reads the cached blocks.

        Args:
            fresh: Recompute the clean string and overwrite its cache
        """
        if fresh or self.state.clean_string is None:
            self.state.clean_string = deblock(self.state.source, self.get_blocks(False))
        return self.state.clean_string

    def get_distinct_blocks(self) -> list[Block]:
        """Get the cached blocks without content duplicates, first seen first."""
        return unique_by_content(self.get_blocks(False))

    def parse(self, source: str | None = None) -> ParserResult:
        """
        Parse a source string into a :class:`ParserResult`.

        Args:
            source: New source string; the current one is used when omitted
        """
        if source is not None:
            self.source_string = source

        blocks = self.get_blocks()
        result = self.result_factory.make(
            self.state.source,
            blocks,
            [block.raw_block for block in blocks],
            self.get_clean_string(),
        )

        logger.debug("Source parsed", **result.log_context())
        return result


def parse_title(source: str, config: "TitleBlocksConfig | None" = None) -> ParserResult:
    """Parse a single title with a throwaway analyser."""
    if config is None:
        return StringAnalyser().parse(source)
    return StringAnalyser.from_config(config).parse(source)
