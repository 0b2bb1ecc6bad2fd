"""Logging configuration for the permissions dashboard.

Every record goes to the console as one readable line, with the context
fields passed to `log_with_context` appended as key=value pairs. When a log
file is configured the same records are also written there as JSON, rotated
at 10MB with 5 backups.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d"

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 5

# uvicorn's request lines repeat the http_request records of the request middleware
QUIET_LOGGERS = ("uvicorn.access",)

# taskName is missing from older python-json-logger releases; color_message is set by uvicorn
STANDARD_RECORD_ATTRS = frozenset(jsonlogger.RESERVED_ATTRS) | {"taskName", "color_message"}


class ContextFormatter(logging.Formatter):
    """Console formatter that appends a record's context fields as key=value pairs."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        context = {
            key: value
            for key, value in vars(record).items()
            if key not in STANDARD_RECORD_ATTRS and not key.startswith("_")
        }
        if not context:
            return line
        return line + " | " + " ".join(f"{key}={value}" for key, value in context.items())


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT))
    handler.setLevel(level)
    return handler


def _json_file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(jsonlogger.JsonFormatter(JSON_FORMAT, timestamp=True))
    handler.setLevel(logging.DEBUG)
    return handler


def setup_logging(log_level: str = "INFO", log_file: Path | None = None) -> logging.Logger:
    """Configure console logging and, optionally, a rotating JSON log file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path of the JSON log file, or None for console only

    Returns:
        Configured root logger instance
    """
    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    root_logger.addHandler(_console_handler(level))
    if log_file is not None:
        root_logger.addHandler(_json_file_handler(log_file))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with structured logging support.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance configured for structured logging
    """
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with additional structured context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Additional fields to include in JSON log (e.g., operation, namespace)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra_fields)
