"""Async processing of title streams."""

import time
from collections.abc import AsyncGenerator, AsyncIterable

import anyio
from pydantic import BaseModel, Field

from hother.titleblocks.core.analyser import StringAnalyser
from hother.titleblocks.core.models import ParserResult
from hother.titleblocks.utils.logging import get_logger

logger = get_logger(__name__)


class ProcessedTitle(BaseModel):
    """A title from the stream together with its parse result."""

    title: str = Field(description="Title as received from the stream")
    result: ParserResult = Field(description="Blocks and clean string of the title")
    event_number: int = Field(ge=1, description="Sequential number among processed titles")
    timestamp: float = Field(ge=0, description="Time since stream start")


async def process_titles(
    stream: AsyncIterable[str],
    analyser: StringAnalyser | None = None,
    timeout: float | None = None,
) -> AsyncGenerator[ProcessedTitle, None]:
    """
    Parse every title of an async stream.

    Titles are parsed one at a time with a single analyser. Blank titles are
    skipped.

    Args:
        stream: Async iterable of title strings
        analyser: Analyser to use (default: one built from the default configuration)
        timeout: Optional timeout in seconds for the entire stream

    Yields:
        ProcessedTitle instances in stream order

    Raises:
        TimeoutError: If the stream is not exhausted within ``timeout``
        BlockDefinitionExtractionError: If the pattern engine fails on a title
    """
    if analyser is None:
        analyser = StringAnalyser()

    start_time = time.time()
    deadline = anyio.current_time() + timeout if timeout is not None else None
    iterator = aiter(stream)
    event_number = 0
    skipped = 0

    while True:
        try:
            if deadline is None:
                title = await anext(iterator)
            else:
                with anyio.fail_after(max(deadline - anyio.current_time(), 0)):
                    title = await anext(iterator)
        except StopAsyncIteration:
            break

        if not title or not title.strip():
            skipped += 1
            continue

        event_number += 1
        result = analyser.parse(title)

        yield ProcessedTitle(title=title, result=result, event_number=event_number, timestamp=time.time() - start_time)

        await anyio.sleep(0)

    logger.info("Title stream processed", processed=event_number, skipped=skipped, elapsed=time.time() - start_time)
