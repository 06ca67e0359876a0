"""Error taxonomy surfaced to MCP clients.

Every failure a tool can report is a ``UIContextError``. The server layer
serializes it to a JSON envelope::

    {"error": {"code": "NOT_FOUND", "message": "...", "suggestion": "...", "recoverable": false}}

Messages must never contain filesystem paths, stack traces or OS error codes.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    CONTENT_TOO_LARGE = "CONTENT_TOO_LARGE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class UIContextError(Exception):
    """A request-scoped failure with a caller-safe message."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        *,
        suggestion: str = "",
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.recoverable = recoverable

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "suggestion": self.suggestion,
                "recoverable": self.recoverable,
            }
        }


def internal_error(tool: str) -> UIContextError:
    """Generic failure for anything unexpected. Details stay in the log."""
    return UIContextError(
        ErrorCode.INTERNAL_ERROR,
        f"An internal error occurred while processing {tool}.",
        suggestion="Try again later or use a different tool.",
    )
