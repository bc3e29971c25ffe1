"""
Unit tests for logging utilities.
"""

import logging

from querymapper.query.parser import FilterParser
from querymapper.utils.logging import setup_logger


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_level_and_file(self, tmp_path):
        log_file = tmp_path / "qm.log"
        logger = setup_logger("querymapper.test", level="DEBUG", log_file=str(log_file))

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        logger.debug("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()

    def test_setup_replaces_handlers(self):
        setup_logger("querymapper.test2")
        logger = setup_logger("querymapper.test2")
        assert len(logger.handlers) == 1

    def test_parser_warnings_reach_package_logger(self, tmp_path):
        """The parser's child logger propagates to the configured package logger."""
        log_file = tmp_path / "parser.log"
        logger = setup_logger("querymapper", level="WARNING", log_file=str(log_file))
        try:
            FilterParser("/", "a=1&broken")
            for handler in logger.handlers:
                handler.flush()
            assert "broken" in log_file.read_text()
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
