"""
Factories materializing blocks and parser results.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from .models import Block, BlockDefinition, ParserResult


class BaseBlockFactory(BaseModel, ABC):
    """Base class for block factories."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @abstractmethod
    def make(self, content: str, definition: BlockDefinition) -> Block:
        """
        Create a block from captured text.

        Args:
            content: Text captured between the delimiters
            definition: Definition whose pattern matched

        Returns:
            A block whose ``raw_block`` reproduces the matched source text
        """


class BlockFactory(BaseBlockFactory):
    """Default factory producing plain :class:`Block` instances."""

    block_class: type[Block] = Field(default=Block, description="Block model to instantiate")

    def make(self, content: str, definition: BlockDefinition) -> Block:
        return self.block_class(content=content, definition=definition)


class ParserResultFactory(BaseModel):
    """Factory assembling :class:`ParserResult` instances."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    result_class: type[ParserResult] = Field(default=ParserResult, description="Result model to instantiate")

    def make(self, source: str, blocks: list[Block], raw_blocks: list[str], clean_source: str) -> ParserResult:
        return self.result_class(source=source, blocks=blocks, raw_blocks=raw_blocks, clean_source=clean_source)
