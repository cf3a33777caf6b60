"""Logging setup for Pura Search.

Modules log through ``logging.getLogger(__name__)``. Because the package is
named ``pura_search``, every such logger is a child of the one configured
by ``setup_logging``.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

ROOT_LOGGER_NAME = "pura_search"

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(module)s:%(funcName)s | %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONExceptionFormatter(logging.Formatter):
    """One JSON object per record, with the traceback inlined when present."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": {
                "file": record.filename,
                "function": record.funcName,
                "line": record.lineno,
            },
        }

        exc_type, exc_value, _ = record.exc_info or (None, None, None)
        if exc_type is not None:
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value) if exc_value else None,
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(entry)


def _build_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JSONExceptionFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_format: bool = False,
) -> logging.Logger:
    """Configure the ``pura_search`` logger.

    Safe to call more than once: previous handlers are closed and replaced,
    so the API and each CLI invocation can set their own level.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Also write to this file, creating its directory.
        json_format: Emit JSON lines instead of the pipe-separated text format.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = _build_formatter(json_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or its ``name`` child."""
    if name:
        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    return logging.getLogger(ROOT_LOGGER_NAME)
