"""Exception handling utilities for consistent error formatting.

Formats exceptions as structured JSON, logs them consistently, and maps
them to HTTP status codes for the API.
"""

import json
import logging
import traceback
from typing import Any

from ...core.domain.exceptions import (
    ConfigurationError,
    ContentNotFoundError,
    PuraSearchError,
    RetrievalError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def format_exception_json(
    exc: Exception,
    include_trace: bool = False,
    extra_context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Format any exception as structured JSON.

    Works with both PuraSearchError and standard Python exceptions.

    Args:
        exc: The exception to format.
        include_trace: If True, include full stack trace.
        extra_context: Additional context to include in output.

    Returns:
        Dictionary with structured error information.
    """
    if isinstance(exc, PuraSearchError):
        result = exc.to_dict(include_trace=include_trace)
        if extra_context:
            result.setdefault("context", {}).update(extra_context)
        return result

    tb = traceback.extract_tb(exc.__traceback__) if exc.__traceback__ else []
    last_frame = tb[-1] if tb else None

    result: dict[str, Any] = {
        "error": {
            "type": type(exc).__name__,
            "code": "PYTHON_ERR",
            "message": str(exc),
        },
        "location": {
            "class": "<unknown>",
            "method": last_frame.name if last_frame else "<unknown>",
            "file": (
                last_frame.filename.split("\\")[-1].split("/")[-1] if last_frame else "<unknown>"
            ),
            "line": last_frame.lineno if last_frame else 0,
        },
    }

    if extra_context:
        result["context"] = extra_context

    if include_trace:
        result["stack_trace"] = [
            line.strip()
            for line in traceback.format_exception(type(exc), exc, exc.__traceback__)
            if line.strip()
        ]

    return result


def log_exception(
    exc: Exception,
    log: logging.Logger | None = None,
    level: int = logging.ERROR,
    extra_context: dict[str, Any] | None = None,
) -> None:
    """Log exception in structured JSON format.

    Args:
        exc: The exception to log.
        log: Logger instance to use (defaults to module logger).
        level: Logging level (default: ERROR).
        extra_context: Additional context to include.
    """
    log_instance = log or logger

    exc_data = format_exception_json(exc, include_trace=True, extra_context=extra_context)
    log_instance.log(level, json.dumps(exc_data, indent=2, default=str))


def get_error_code(exc: Exception) -> str:
    """Get the error code from an exception.

    Args:
        exc: The exception to get code from.

    Returns:
        Error code string (e.g., "PS_RET_002" or "PYTHON_ERR").
    """
    if isinstance(exc, PuraSearchError):
        return exc.error_code
    return "PYTHON_ERR"


def get_http_status_code(exc: Exception) -> int:
    """Map exception type to appropriate HTTP status code.

    Args:
        exc: The exception to map.

    Returns:
        HTTP status code (400, 404, 500, 503, etc.).
    """
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, ContentNotFoundError):
        return 404
    if isinstance(exc, RetrievalError | StorageError):
        return 503
    if isinstance(exc, ConfigurationError):
        return 500
    if isinstance(exc, PuraSearchError):
        return 500

    # Standard Python exceptions
    if isinstance(exc, ValueError):
        return 400
    if isinstance(exc, ConnectionError | TimeoutError):
        return 503

    return 500
