"""Logging setup for the short link service.

All components log through children of the ``shortlink`` logger
(``shortlink.registry``, ``shortlink.redirect``, ``shortlink.web``), so a
single call to :func:`setup_logging` routes every record to the same handlers.
"""

import json
import logging
import sys
from typing import Optional

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
PLAIN_DATEFMT = "%Y-%m-%d %H:%M:%S"


class JSONFormatter(logging.Formatter):
    """One JSON object per record; messages and tracebacks are escaped by json.dumps."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _make_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JSONFormatter()
    return logging.Formatter(PLAIN_FORMAT, datefmt=PLAIN_DATEFMT)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """Configure the ``shortlink`` logger.

    Replaces any handlers installed by an earlier call, then logs to stdout
    and, when ``log_file`` is given, to that file as well.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown
            names fall back to INFO
        log_file: Optional log file path
        json_format: Emit one JSON object per line instead of plain text

    Returns:
        The configured ``shortlink`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = _make_formatter(json_format)

    logger = logging.getLogger("shortlink")
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str = "shortlink") -> logging.Logger:
    return logging.getLogger(name)
