"""Tests for logging configuration module."""

import json
import logging
import os
import sys
from io import StringIO
from unittest.mock import patch

import pytest

from neatgenes.logging_config import LOGGER_NAME, JSONFormatter, configure_logging


@pytest.fixture(autouse=True)
def restore_logger():
    """Remove handlers installed by a test and restore the logger level."""
    logger = logging.getLogger(LOGGER_NAME)
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.handlers = handlers
    logger.setLevel(level)


def _our_handlers():
    return [h for h in logging.getLogger(LOGGER_NAME).handlers
            if getattr(h, "_neatgenes_handler", False)]


class TestLevelFromEnvironment:
    """Tests for the level read from NEATGENES_LOG_LEVEL."""

    def test_default_is_warning(self):
        """Without the variable the level should be WARNING."""
        with patch.dict(os.environ, {}, clear=True):
            assert configure_logging().level == logging.WARNING

    def test_debug_level(self):
        """NEATGENES_LOG_LEVEL=DEBUG should select DEBUG."""
        with patch.dict(os.environ, {"NEATGENES_LOG_LEVEL": "DEBUG"}):
            assert configure_logging().level == logging.DEBUG

    def test_case_insensitive(self):
        """Log level should be case insensitive."""
        with patch.dict(os.environ, {"NEATGENES_LOG_LEVEL": "info"}):
            assert configure_logging().level == logging.INFO

    def test_invalid_level_defaults_to_warning(self):
        """Invalid log level should fall back to WARNING."""
        with patch.dict(os.environ, {"NEATGENES_LOG_LEVEL": "LOUD"}):
            assert configure_logging().level == logging.WARNING

    def test_argument_overrides_environment(self):
        """An explicit level wins over the environment."""
        with patch.dict(os.environ, {"NEATGENES_LOG_LEVEL": "DEBUG"}):
            assert configure_logging(level=logging.ERROR).level == logging.ERROR


class TestFormat:
    """Tests for the text and JSON output formats."""

    def test_text_output(self):
        """Text records should contain level, logger name and message."""
        stream = StringIO()
        with patch("sys.stderr", stream):
            configure_logging(level=logging.INFO, fmt="text")
        logging.getLogger("neatgenes.genotype.traits").info("hello %d", 5)

        output = stream.getvalue()
        assert "INFO" in output
        assert "[neatgenes.genotype.traits]" in output
        assert "hello 5" in output

    def test_json_output(self):
        """JSON records should be one parseable object per line."""
        stream = StringIO()
        with patch("sys.stderr", stream):
            configure_logging(level=logging.INFO, fmt="json")
        logging.getLogger("neatgenes.run.config").warning("loaded %s", "x.ini")

        data = json.loads(stream.getvalue().strip())
        assert data["level"] == "WARNING"
        assert data["logger"] == "neatgenes.run.config"
        assert data["message"] == "loaded x.ini"
        assert "timestamp" in data

    def test_json_from_environment(self):
        """NEATGENES_LOG_FORMAT=json should select the JSON formatter."""
        with patch.dict(os.environ, {"NEATGENES_LOG_FORMAT": "JSON"}):
            configure_logging()
        assert isinstance(_our_handlers()[0].formatter, JSONFormatter)

    def test_invalid_format_rejected(self):
        """An explicit unknown format is an error."""
        with pytest.raises(ValueError, match="Invalid log format"):
            configure_logging(fmt="xml")

    def test_json_formatter_exception(self):
        """Exceptions should be included in JSON records."""
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.getLogger(LOGGER_NAME).makeRecord(
                LOGGER_NAME, logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

        data = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in data["exception"]


class TestConfigureLogging:
    """Tests for repeated configuration."""

    def test_reconfigure_replaces_handler(self):
        """Calling configure_logging twice should leave a single handler."""
        configure_logging(level=logging.INFO)
        configure_logging(level=logging.DEBUG)

        assert len(_our_handlers()) == 1
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_returns_library_logger(self):
        """The returned logger should be the package logger."""
        assert configure_logging().name == LOGGER_NAME
