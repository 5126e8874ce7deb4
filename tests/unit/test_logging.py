"""Tests for logging utilities."""

import logging
import subprocess
import sys

import structlog

from hother.titleblocks.utils.logging import configure_logging, get_logger


class TestLogging:
    """Test logging helpers."""

    def test_get_logger_accepts_key_values(self):
        """Loggers take structured key-value pairs."""
        logger = get_logger("hother.titleblocks.tests")
        logger.debug("Definition skipped", definition="[ ]", status="absent")

    def test_get_logger_defaults_to_caller(self):
        """Without a name the caller module is used."""
        assert get_logger() is not None

    def test_silent_without_configuration(self):
        """Parsing prints nothing when the application has not set up logging."""
        code = (
            "from hother.titleblocks import StringAnalyser\n"
            "analyser = StringAnalyser().set_source_string('[SUB] plain title (x')\n"
            "analyser.get_blocks()\n"
            "analyser.parse()\n"
        )

        completed = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, check=True)

        assert completed.stdout == ""

    def test_records_follow_stdlib_levels(self, caplog):
        """Events reach stdlib handlers with their key-values as extras."""
        logger = get_logger("hother.titleblocks.tests")

        with caplog.at_level(logging.INFO, logger="hother.titleblocks.tests"):
            logger.debug("Hidden event", status="absent")
            logger.info("Shown event", block_count=2)

        assert [record.getMessage() for record in caplog.records] == ["Shown event"]
        assert caplog.records[0].block_count == 2

    def test_configure_logging_sets_level(self):
        """The root logger level follows the configuration."""
        root = logging.getLogger()
        previous_level = root.level
        previous_handlers = list(root.handlers)
        try:
            configure_logging(log_level="DEBUG")
            configure_logging(log_level="WARNING", json_output=True)

            assert root.level == logging.WARNING
            added = [h for h in root.handlers if h not in previous_handlers]
            assert len(added) == 1
        finally:
            for handler in list(root.handlers):
                if handler not in previous_handlers:
                    root.removeHandler(handler)
            root.setLevel(previous_level)
            structlog.reset_defaults()

    def test_configured_output_carries_key_values(self, capsys):
        """Configured logging renders the event together with its key-values."""
        root = logging.getLogger()
        previous_level = root.level
        previous_handlers = list(root.handlers)
        try:
            configure_logging(log_level="DEBUG", json_output=True)
            get_logger("hother.titleblocks.tests").info("Blocks extracted", block_count=3)

            out = capsys.readouterr().out
            assert "Blocks extracted" in out
            assert '"block_count": 3' in out
        finally:
            for handler in list(root.handlers):
                if handler not in previous_handlers:
                    root.removeHandler(handler)
            root.setLevel(previous_level)
            structlog.reset_defaults()
