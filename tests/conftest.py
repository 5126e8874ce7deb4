"""Shared fixtures for titleblocks tests."""

import pytest

from hother.titleblocks import BlockDefinition, StringAnalyser


@pytest.fixture
def analyser():
    """Analyser using the default definitions."""
    return StringAnalyser()


@pytest.fixture
def brackets():
    """Square bracket definition."""
    return BlockDefinition.of("[", "]")
