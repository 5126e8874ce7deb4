"""Stream processing utilities for titles."""

from .processor import ProcessedTitle, process_titles

__all__ = [
    "ProcessedTitle",
    "process_titles",
]
