"""
Removal of extracted blocks from a source string.
"""

from collections.abc import Iterable

from .models import Block


def deblock(source: str, blocks: Iterable[Block]) -> str:
    """
    Remove the raw text of each block from the source.

    Blocks are removed one after another from a working copy, so each lookup
    sees earlier removals. A whitespace character directly before and/or
    after the located block is removed along with it, and every occurrence
    of that padded text is dropped, not just the located one.

    Args:
        source: The string the blocks were extracted from
        blocks: Blocks in extraction order

    Returns:
        The working copy with surrounding whitespace trimmed
    """
    working = source

    for block in blocks:
        raw = block.raw_block
        start = working.find(raw)
        if start == -1:
            # Already gone through an earlier global removal
            continue

        end = start + len(raw)
        removal = raw

        if start > 0 and working[start - 1].isspace():
            removal = working[start - 1] + removal
        if end < len(working) and working[end].isspace():
            removal = removal + working[end]

        working = working.replace(removal, "")

    return working.strip()
