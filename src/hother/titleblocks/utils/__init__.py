"""Utility helpers for the titleblocks library."""

from .logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
