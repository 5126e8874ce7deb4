"""
Titleblocks - Metadata block extraction for media titles

Extracts delimited blocks such as ``[1080p]`` or ``(2019)`` from release and
file names, and produces the clean title left once they are removed.
"""

import importlib.metadata

from .config import DEFAULT_BLOCK_DEFINITIONS, TitleBlocksConfig
from .core.analyser import AnalyserState, StringAnalyser, parse_title
from .core.deblock import deblock
from .core.exceptions import (
    BlockDefinitionExtractionError,
    BlockDefinitionUnbalanced,
    InvalidBlockDefinition,
    TitleBlocksError,
)
from .core.extraction import BlockExtractor
from .core.factory import BaseBlockFactory, BlockFactory, ParserResultFactory
from .core.models import Block, BlockDefinition, DefinitionCheck, DefinitionStatus, ParserResult
from .streaming import ProcessedTitle, process_titles

try:
    __version__ = importlib.metadata.version("hother-titleblocks")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0+dev"

__all__ = [
    # Models
    "Block",
    "BlockDefinition",
    "DefinitionCheck",
    "DefinitionStatus",
    "ParserResult",
    # Core
    "StringAnalyser",
    "AnalyserState",
    "BlockExtractor",
    "deblock",
    "parse_title",
    # Factories
    "BaseBlockFactory",
    "BlockFactory",
    "ParserResultFactory",
    # Configuration
    "TitleBlocksConfig",
    "DEFAULT_BLOCK_DEFINITIONS",
    # Exceptions
    "TitleBlocksError",
    "InvalidBlockDefinition",
    "BlockDefinitionUnbalanced",
    "BlockDefinitionExtractionError",
    # Streaming
    "process_titles",
    "ProcessedTitle",
]
