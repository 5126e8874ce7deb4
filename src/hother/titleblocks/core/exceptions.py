"""
Custom exceptions for the block extraction system.
"""

from collections.abc import Sequence


class TitleBlocksError(Exception):
    """
    Base exception for block extraction errors.

    Attributes:
        definition: The delimiters of the block definition involved
        message: Human readable description of the failure
    """

    def __init__(self, definition: Sequence[str] | None = None, message: str | None = None):
        self.definition = tuple(definition) if definition is not None else None
        self.message = message or f"Block definition error: {self.definition!r}"
        super().__init__(self.message)


class InvalidBlockDefinition(TitleBlocksError):
    """Definition is not a pair, or a delimiter mixes different characters."""

    def __init__(self, definition: Sequence[str] | None = None, message: str | None = None):
        super().__init__(definition, message or f"Invalid block definition: {tuple(definition or ())!r}")


class BlockDefinitionUnbalanced(TitleBlocksError):
    """Start and end delimiters occur a different number of times in the source."""

    def __init__(
        self,
        definition: Sequence[str],
        start_count: int,
        end_count: int,
        message: str | None = None,
    ):
        self.start_count = start_count
        self.end_count = end_count
        default_message = f"Block definition {tuple(definition)!r} is unbalanced ({start_count} start, {end_count} end)"
        super().__init__(definition, message or default_message)


class BlockDefinitionExtractionError(TitleBlocksError):
    """The pattern engine failed while scanning for a definition."""

    def __init__(self, definition: Sequence[str], message: str | None = None):
        super().__init__(definition, message or f"Failed to extract blocks for definition {tuple(definition)!r}")
