"""Tests for block extraction."""

import re

import pytest

from hother.titleblocks import Block, BlockDefinition, BlockDefinitionExtractionError, BlockExtractor, BlockFactory
from hother.titleblocks.config import DEFAULT_BLOCK_DEFINITIONS
from hother.titleblocks.core import extraction


def contents(blocks):
    return [block.content for block in blocks]


class TestExtractForDefinition:
    """Test extraction of a single definition."""

    def test_extracts_in_match_order(self, brackets):
        """Matches are returned left to right."""
        extractor = BlockExtractor([brackets])
        blocks = extractor.extract_for_definition("[SUB] show [1080p]", brackets)

        assert contents(blocks) == ["SUB", "1080p"]
        assert all(block.definition == brackets for block in blocks)

    def test_content_spans_line_breaks(self, brackets):
        """The interior may contain line breaks."""
        blocks = BlockExtractor([brackets]).extract_for_definition("[line\nbreak] x", brackets)
        assert contents(blocks) == ["line\nbreak"]

    def test_shortest_match_on_nested_input(self, brackets):
        """Nested delimiters end at the first closing delimiter."""
        blocks = BlockExtractor([brackets]).extract_for_definition("[a [b] c]", brackets)
        assert contents(blocks) == ["a [b"]

    def test_repeated_character_delimiters(self):
        """Multi-character delimiters match their exact repetition."""
        definition = BlockDefinition.of("[[", "]]")
        blocks = BlockExtractor([definition]).extract_for_definition("[[Group]] Title [[720p]]", definition)
        assert contents(blocks) == ["Group", "720p"]

    def test_unbalanced_yields_nothing(self, brackets):
        """Unbalanced definitions are skipped."""
        assert BlockExtractor([brackets]).extract_for_definition("[a] [b", brackets) == []

    def test_absent_yields_nothing(self, brackets):
        """Definitions not present are skipped."""
        assert BlockExtractor([brackets]).extract_for_definition("plain title", brackets) == []

    def test_invalid_yields_nothing(self):
        """Invalid definitions are skipped."""
        definition = BlockDefinition.of("[(", ")]")
        assert BlockExtractor([definition]).extract_for_definition("[(a)]", definition) == []

    def test_uses_block_factory(self, brackets):
        """Matches are materialized through the factory."""
        made = []

        class RecordingFactory(BlockFactory):
            def make(self, content, definition):
                made.append((content, definition))
                return super().make(content, definition)

        BlockExtractor([brackets], RecordingFactory()).extract_for_definition("[a][b]", brackets)

        assert made == [("a", brackets), ("b", brackets)]


class TestExtractAll:
    """Test extraction over all definitions."""

    def test_definitions_accept_sequences(self):
        """Raw delimiter pairs are coerced into definitions."""
        extractor = BlockExtractor([["[", "]"]])
        assert extractor.definitions == (BlockDefinition.of("[", "]"),)

    def test_definition_order(self):
        """Blocks follow definition order, then match order."""
        extractor = BlockExtractor(DEFAULT_BLOCK_DEFINITIONS)
        blocks = extractor.extract_all("(2019) [1080p] {x} [HEVC]")
        assert contents(blocks) == ["1080p", "HEVC", "2019", "x"]

    def test_bad_definitions_do_not_affect_others(self):
        """Skipped definitions leave the rest untouched."""
        extractor = BlockExtractor([("[(", ")]"), ("[",), ("(", ")"), ("[", "]")])
        blocks = extractor.extract_all("[(a)] [b] (c")
        assert contents(blocks) == ["(a)", "b"]

    def test_unbalanced_definition_skipped(self):
        """An unbalanced pair contributes nothing."""
        extractor = BlockExtractor(DEFAULT_BLOCK_DEFINITIONS)
        assert contents(extractor.extract_all("[SUB] show (2019.mkv")) == ["SUB"]

    def test_deterministic(self):
        """The same input always gives the same blocks."""
        extractor = BlockExtractor(DEFAULT_BLOCK_DEFINITIONS)
        source = "[A] (B) [C] {D}"
        assert extractor.extract_all(source) == extractor.extract_all(source)

    def test_engine_failure_is_fatal(self, monkeypatch):
        """Pattern engine failures abort the whole extraction."""

        def broken(start, end):
            raise re.error("engine failure")

        monkeypatch.setattr(extraction, "_compile_pattern", broken)
        extractor = BlockExtractor([("[", "]"), ("(", ")")])

        with pytest.raises(BlockDefinitionExtractionError) as exc_info:
            extractor.extract_all("[a] (b)")

        assert exc_info.value.definition == ("[", "]")
        assert isinstance(exc_info.value.__cause__, re.error)

    def test_engine_failure_not_raised_for_skipped_definitions(self, monkeypatch):
        """Skipped definitions never reach the pattern engine."""

        def broken(start, end):
            raise re.error("engine failure")

        monkeypatch.setattr(extraction, "_compile_pattern", broken)
        assert BlockExtractor([("[", "]")]).extract_all("no blocks") == []


class TestBuildPattern:
    """Test pattern building."""

    def test_pattern_flags(self, brackets):
        """Patterns are dot-all and case-insensitive."""
        pattern = extraction.build_pattern(brackets)
        assert pattern.flags & re.DOTALL
        assert pattern.flags & re.IGNORECASE

    def test_case_insensitive_letters(self):
        """Letter delimiters match regardless of case."""
        definition = BlockDefinition.of("x", "x")
        pattern = extraction.build_pattern(definition)
        assert pattern.findall("X1x") == ["1"]

    def test_block_type(self, brackets):
        """Extracted items are Block instances."""
        blocks = BlockExtractor([brackets]).extract_all("[a]")
        assert isinstance(blocks[0], Block)
