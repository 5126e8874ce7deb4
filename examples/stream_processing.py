#!/usr/bin/env python3
"""
Parse a stream of file names as they arrive.
"""

import anyio

from hother.titleblocks import process_titles
from hother.titleblocks.utils.logging import configure_logging

configure_logging(log_level="INFO")

TITLES = [
    "[Group] Some Show - 01 [1080p][ABCD1234].mkv",
    "Another Movie (2019) [2160p] {HDR}.mkv",
    "",
    "Plain Title.mp4",
]


async def listing():
    """Simulate file names arriving from a directory watcher."""
    for title in TITLES:
        await anyio.sleep(0.1)
        yield title


async def main():
    async for event in process_titles(listing(), timeout=5.0):
        print(f"#{event.event_number} {event.result.clean_source!r} <- {event.result.contents}")


if __name__ == "__main__":
    anyio.run(main)
