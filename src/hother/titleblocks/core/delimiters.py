"""
Delimiter validation, balance checking and pattern compilation.
"""

import re

from .exceptions import BlockDefinitionUnbalanced, InvalidBlockDefinition
from .models import BlockDefinition, DefinitionCheck, DefinitionStatus


def validate_delimiter(delimiter: str) -> str | None:
    """
    Validate a single delimiter.

    A delimiter is one character, or the same character repeated.

    Args:
        delimiter: The delimiter to validate

    Returns:
        Error message if invalid, None if valid
    """
    if not isinstance(delimiter, str) or not delimiter:
        return f"Delimiter must be a non-empty string, got {delimiter!r}"
    if len(delimiter) == 1:
        return None
    if delimiter.count(delimiter[0]) != len(delimiter):
        return f"Delimiter {delimiter!r} should contain identical characters"
    return None


def validate_definition(definition: BlockDefinition) -> str | None:
    """
    Validate both delimiters of a definition.

    Args:
        definition: The definition to validate

    Returns:
        Error message if invalid, None if valid
    """
    if definition.arity != 2:
        return f"Block definition needs exactly 2 delimiters, got {definition.arity}"

    for delimiter in definition.delimiters:
        error = validate_delimiter(delimiter)
        if error:
            return error
    return None


def ensure_valid_definition(definition: BlockDefinition) -> None:
    """
    Validate a definition, raising on failure.

    Raises:
        InvalidBlockDefinition: If the definition is malformed
    """
    error = validate_definition(definition)
    if error:
        raise InvalidBlockDefinition(definition.delimiters, error)


def check_definition(source: str, definition: BlockDefinition) -> DefinitionCheck:
    """
    Check whether a definition is valid, present and balanced in the source.

    Occurrences are counted as plain, non-overlapping substrings. Equal
    counts with at least one start/end pair mean the definition is present;
    zero occurrences mean it is absent.

    Args:
        source: The string being analysed
        definition: The definition to check

    Returns:
        The outcome of the check
    """
    error = validate_definition(definition)
    if error:
        return DefinitionCheck(definition=definition, status=DefinitionStatus.INVALID, reason=error)

    start_count = source.count(definition.start)
    end_count = source.count(definition.end)

    if start_count != end_count:
        return DefinitionCheck(
            definition=definition,
            status=DefinitionStatus.UNBALANCED,
            start_count=start_count,
            end_count=end_count,
            reason=f"{start_count} start delimiters vs {end_count} end delimiters",
        )

    status = DefinitionStatus.PRESENT if start_count + end_count >= 2 else DefinitionStatus.ABSENT
    return DefinitionCheck(definition=definition, status=status, start_count=start_count, end_count=end_count)


def is_present_and_balanced(source: str, definition: BlockDefinition) -> bool:
    """
    Strict form of :func:`check_definition`.

    Returns:
        True if at least one start/end pair is present, False if none is

    Raises:
        InvalidBlockDefinition: If the definition is malformed
        BlockDefinitionUnbalanced: If the delimiter counts differ
    """
    check = check_definition(source, definition)
    if check.status is DefinitionStatus.INVALID:
        raise InvalidBlockDefinition(definition.delimiters, check.reason)
    if check.status is DefinitionStatus.UNBALANCED:
        raise BlockDefinitionUnbalanced(definition.delimiters, check.start_count, check.end_count)
    return check.should_extract


def compile_delimiter(delimiter: str) -> str:
    """
    Turn a validated delimiter into a regex fragment.

    A single character is escaped as a literal. A repeated character becomes
    an exact-count repetition, e.g. ``"==="`` gives ``"={3}"``.

    Raises:
        InvalidBlockDefinition: If the delimiter is malformed
    """
    error = validate_delimiter(delimiter)
    if error:
        raise InvalidBlockDefinition((delimiter,), error)

    if len(delimiter) == 1:
        return re.escape(delimiter)
    return f"{re.escape(delimiter[0])}{{{len(delimiter)}}}"
