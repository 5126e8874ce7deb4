#!/usr/bin/env python3
"""
Basic usage examples for title block extraction.
"""

from hother.titleblocks import StringAnalyser, TitleBlocksConfig, parse_title
from hother.titleblocks.utils.logging import configure_logging, get_logger

# Configure logging
configure_logging(log_level="INFO")
logger = get_logger(__name__)


def example_analyser():
    """Example: Blocks and clean string of a release title."""
    print("\n=== Analyser Example ===")

    analyser = StringAnalyser().set_source_string("[SUB] some random show - 01 [1080p][1234567].mkv")

    print(f"  Blocks: {[block.content for block in analyser.get_blocks()]}")
    print(f"  Clean:  {analyser.get_clean_string()!r}")


def example_distinct_blocks():
    """Example: Repeated blocks."""
    print("\n=== Distinct Blocks Example ===")

    analyser = StringAnalyser().set_source_string("[SUB][SUB] some random show - 01 [1080p].mkv")

    print(f"  All:      {[str(block) for block in analyser.get_blocks()]}")
    print(f"  Distinct: {[str(block) for block in analyser.get_distinct_blocks()]}")


def example_configuration():
    """Example: Custom definitions loaded from a mapping."""
    print("\n=== Configuration Example ===")

    config = TitleBlocksConfig.from_mapping({"titleblocks": {"block_definitions": [["==", "=="], ["[", "]"]]}})
    result = parse_title("==Group== Movie Title [2160p]", config)

    print(f"  Blocks: {result.contents}")
    print(f"  Raw:    {result.raw_blocks}")
    print(f"  Clean:  {result.clean_source!r}")
    logger.info("Title parsed", **result.log_context())


def main():
    """Run all examples."""
    example_analyser()
    example_distinct_blocks()
    example_configuration()


if __name__ == "__main__":
    main()
