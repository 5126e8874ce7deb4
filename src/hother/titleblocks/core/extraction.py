"""
Core block extraction logic.
"""

import re
from collections.abc import Iterable, Sequence
from functools import lru_cache

from hother.titleblocks.utils.logging import get_logger

from .delimiters import check_definition, compile_delimiter
from .exceptions import BlockDefinitionExtractionError
from .factory import BaseBlockFactory, BlockFactory
from .models import Block, BlockDefinition, DefinitionCheck, as_definitions

logger = get_logger(__name__)

PATTERN_FLAGS = re.DOTALL | re.IGNORECASE | re.UNICODE


@lru_cache(maxsize=256)
def _compile_pattern(start: str, end: str) -> re.Pattern[str]:
    return re.compile(f"{compile_delimiter(start)}(.+?){compile_delimiter(end)}", PATTERN_FLAGS)


def build_pattern(definition: BlockDefinition) -> re.Pattern[str]:
    """
    Compile the scan pattern for a validated definition.

    The pattern is the start fragment, the shortest run of any character
    (line breaks included), then the end fragment, matched case-insensitively.

    Raises:
        BlockDefinitionExtractionError: If the pattern engine rejects the pattern
    """
    try:
        return _compile_pattern(definition.start, definition.end)
    except re.error as e:
        raise BlockDefinitionExtractionError(definition.delimiters, f"Cannot compile pattern for {definition.delimiters!r}: {e}") from e


class BlockExtractor:
    """Extracts delimited blocks from source strings."""

    def __init__(self, definitions: Iterable[BlockDefinition | Sequence[str]], block_factory: BaseBlockFactory | None = None):
        """
        Initialize block extractor.

        Args:
            definitions: Ordered block definitions; order decides block order
            block_factory: Factory materializing matches (default: BlockFactory)
        """
        self.definitions: tuple[BlockDefinition, ...] = tuple(as_definitions(definitions))
        self.block_factory = block_factory or BlockFactory()

    def check(self, source: str, definition: BlockDefinition) -> DefinitionCheck:
        """Check a definition against the source without extracting."""
        return check_definition(source, definition)

    def extract_for_definition(self, source: str, definition: BlockDefinition) -> list[Block]:
        """
        Extract every block of one definition, left to right.

        Invalid, unbalanced and absent definitions yield no blocks.

        Args:
            source: The string to scan
            definition: The definition to extract

        Returns:
            Blocks in match order

        Raises:
            BlockDefinitionExtractionError: If the pattern engine fails
        """
        check = self.check(source, definition)
        if not check.should_extract:
            logger.debug("Definition skipped", **check.log_context())
            return []

        pattern = build_pattern(definition)

        try:
            matches = list(pattern.finditer(source))
        except (re.error, RecursionError) as e:
            raise BlockDefinitionExtractionError(definition.delimiters, f"Pattern scan failed for {definition.delimiters!r}: {e}") from e

        return [self.block_factory.make(match.group(1), definition) for match in matches]

    def extract_all(self, source: str) -> list[Block]:
        """
        Extract blocks for every configured definition, in configured order.

        Raises:
            BlockDefinitionExtractionError: If the pattern engine fails for any definition
        """
        blocks: list[Block] = []

        for definition in self.definitions:
            try:
                blocks.extend(self.extract_for_definition(source, definition))
            except BlockDefinitionExtractionError as e:
                logger.error("Block extraction failed", definition=str(definition), error=e.message)
                raise

        logger.debug("Blocks extracted", definitions=len(self.definitions), block_count=len(blocks))
        return blocks
