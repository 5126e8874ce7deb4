"""Block extraction core."""

from .analyser import AnalyserState, StringAnalyser, parse_title
from .deblock import deblock
from .delimiters import (
    check_definition,
    compile_delimiter,
    ensure_valid_definition,
    is_present_and_balanced,
    validate_definition,
    validate_delimiter,
)
from .exceptions import BlockDefinitionExtractionError, BlockDefinitionUnbalanced, InvalidBlockDefinition, TitleBlocksError
from .extraction import BlockExtractor, build_pattern
from .factory import BaseBlockFactory, BlockFactory, ParserResultFactory
from .models import Block, BlockDefinition, DefinitionCheck, DefinitionStatus, ParserResult, unique_by_content

__all__ = [
    # Models
    "Block",
    "BlockDefinition",
    "DefinitionCheck",
    "DefinitionStatus",
    "ParserResult",
    "unique_by_content",
    # Delimiters
    "validate_delimiter",
    "validate_definition",
    "ensure_valid_definition",
    "check_definition",
    "is_present_and_balanced",
    "compile_delimiter",
    # Extraction
    "BlockExtractor",
    "build_pattern",
    "deblock",
    # Analyser
    "AnalyserState",
    "StringAnalyser",
    "parse_title",
    # Factories
    "BaseBlockFactory",
    "BlockFactory",
    "ParserResultFactory",
    # Exceptions
    "TitleBlocksError",
    "InvalidBlockDefinition",
    "BlockDefinitionUnbalanced",
    "BlockDefinitionExtractionError",
]
