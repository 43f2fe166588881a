"""Structured logging configuration for Gauss.

All package loggers live under the ``gauss`` logger. The CLI owns stderr
for results and ``Error:`` lines, so once a log file is given the console
only receives warnings and the full trace goes to the file.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

from .config import LOG_LEVEL

ROOT_LOGGER = "gauss"


class StructuredFormatter(logging.Formatter):
    """Formatter producing ``ISO-timestamp [LEVEL] name: message`` lines."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        message = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logging(
    level: str = LOG_LEVEL, log_file: Optional[str] = None
) -> logging.Logger:
    """Configure the ``gauss`` logger for a CLI run.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file receiving every record at ``level``; the
            stderr handler is then limited to WARNING and above

    Returns:
        The configured ``gauss`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    if log_file:
        console_handler.setLevel(logging.WARNING)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a package module, e.g. ``get_logger("matrix")`` -> ``gauss.matrix``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
