"""Root of the Pura Search exception hierarchy.

Errors carry a stable code (``PS_<AREA>_<NNN>``), the raise site, an
optional cause and free-form context. ``to_dict()`` is the shape returned
by the API error handlers and printed by the CLI in debug mode.
"""

import inspect
import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass
class ExceptionContext:
    """Raise site of a PuraSearchError."""

    class_name: str
    method_name: str
    file_name: str
    line_number: int
    timestamp: str = field(default_factory=lambda: datetime.now(UTC).isoformat())

    def to_dict(self) -> dict[str, Any]:
        return {
            "class": self.class_name,
            "method": self.method_name,
            "file": self.file_name,
            "line": self.line_number,
            "timestamp": self.timestamp,
        }


class PuraSearchError(Exception):
    """Base class for every error raised by Pura Search.

    Adapters wrap library failures in a subclass and keep the original as
    ``cause``:

        try:
            rows = conn.execute(query).fetchall()
        except sqlite3.Error as e:
            raise CorpusUnavailableError(
                "Failed to load educational content",
                cause=e,
                context={"db_path": str(db_path)},
            )
    """

    error_code: str = "PS_ERR_001"

    def __init__(
        self,
        message: str,
        *,
        cause: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Create the error and record where it was raised.

        Args:
            message: Human-readable error message.
            cause: Exception being wrapped, if any.
            context: JSON-serializable details such as ids or paths.
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.extra_context = context or {}
        self.location = self._find_raise_site()
        # Only meaningful while the cause is being handled
        self.stack_trace = traceback.format_exc() if cause else None

    def _find_raise_site(self) -> ExceptionContext:
        frame = inspect.currentframe()
        # _find_raise_site -> __init__ -> caller
        for _ in range(2):
            if frame and frame.f_back:
                frame = frame.f_back

        # Subclass __init__ overrides add extra frames
        while frame and frame.f_code.co_name == "__init__" and isinstance(
            frame.f_locals.get("self"), PuraSearchError
        ):
            frame = frame.f_back

        if frame is None:
            return ExceptionContext("<unknown>", "<unknown>", "<unknown>", 0)

        owner = frame.f_locals.get("self")
        return ExceptionContext(
            class_name=type(owner).__name__ if owner is not None else "<module>",
            method_name=frame.f_code.co_name,
            file_name=frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1],
            line_number=frame.f_lineno,
        )

    def to_dict(self, include_trace: bool = False) -> dict[str, Any]:
        """Serialize for API responses and structured logs.

        ``context``, ``cause`` and ``stack_trace`` keys appear only when
        there is something to put in them; the trace also needs
        ``include_trace``.
        """
        result: dict[str, Any] = {
            "error": {
                "type": type(self).__name__,
                "code": self.error_code,
                "message": self.message,
            },
            "location": self.location.to_dict(),
        }

        if self.extra_context:
            result["context"] = self.extra_context

        if include_trace and self.stack_trace:
            result["stack_trace"] = [line for line in self.stack_trace.splitlines() if line.strip()]

        if self.cause:
            result["cause"] = {
                "type": type(self.cause).__name__,
                "message": str(self.cause),
            }

        return result
