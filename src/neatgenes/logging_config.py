"""
Logging Configuration Module

The library only creates loggers (one per module, under the 'neatgenes'
namespace) and never installs handlers on import. Applications that want to
see its messages call 'configure_logging()' once at startup.

Environment variables (used when the matching argument is not given):
    NEATGENES_LOG_LEVEL:  DEBUG, INFO, WARNING, ERROR or CRITICAL (default: WARNING)
    NEATGENES_LOG_FORMAT: 'text' or 'json' (default: text)

Functions:
    configure_logging(level, fmt): Attach a stderr handler to the 'neatgenes' logger
"""

import json
import logging
import os
import sys

LOGGER_NAME = "neatgenes"

_TEXT_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

class JSONFormatter(logging.Formatter):
    """
    Formats each record as a single JSON line.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record),
            "level"    : record.levelname,
            "logger"   : record.name,
            "message"  : record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)

def _level_from_env() -> int:
    name  = os.environ.get("NEATGENES_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING

def _format_from_env() -> str:
    fmt = os.environ.get("NEATGENES_LOG_FORMAT", "text").lower()
    return fmt if fmt in ("text", "json") else "text"

def configure_logging(level: int | None = None, fmt: str | None = None) -> logging.Logger:
    """
    Send the library's log messages to stderr.

    Calling it again replaces the handler installed by the previous call,
    so messages are never duplicated.

    Parameters:
        level: Logging level (e.g. logging.DEBUG); read from the environment if None
        fmt:   Output format, 'text' or 'json'; read from the environment if None

    Returns:
        The 'neatgenes' logger
    """
    if level is None:
        level = _level_from_env()
    if fmt is None:
        fmt = _format_from_env()
    if fmt not in ("text", "json"):
        raise ValueError(f"Invalid log format '{fmt}' (expected 'text' or 'json')")

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_neatgenes_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT))
    handler._neatgenes_handler = True

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
