"""Identifier sanitization and base-directory containment checks.

Two layers guard every path built from caller input:

1. ``sanitize_identifier`` accepts only a single, plain path segment.
2. ``is_within_base`` re-checks the fully assembled path after symlink
   resolution, in case something slips past the first layer.

Both are pure and report failure as a value; ``resolve_within`` is the
tool-facing helper that turns a failure into a ``UIContextError``.
"""

from __future__ import annotations

import os
import re
from enum import StrEnum
from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict

from uicontext.errors import ErrorCode, UIContextError

log = structlog.get_logger()

_ALLOWED = re.compile(r"[A-Za-z0-9\-_.]+")
_TRAVERSAL_MARKERS = ("..", "/", "\\", "\0")


class ValidationErrorKind(StrEnum):
    EMPTY_OR_NOT_STRING = "empty_or_not_string"
    TOO_LONG = "too_long"
    TRAVERSAL_ATTEMPT = "traversal_attempt"
    DISALLOWED_CHARACTERS = "disallowed_characters"


class SanitizeResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str | None = None
    error: ValidationErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


def _fail(kind: ValidationErrorKind, message: str) -> SanitizeResult:
    return SanitizeResult(error=kind, message=message)


def _has_traversal(value: str) -> bool:
    return any(marker in value for marker in _TRAVERSAL_MARKERS)


def sanitize_identifier(value: object, max_length: int = 50) -> SanitizeResult:
    """Validate a caller-supplied name for use as a single path segment."""
    if not isinstance(value, str) or not value:
        return _fail(ValidationErrorKind.EMPTY_OR_NOT_STRING, "Input must be a non-empty string")

    if len(value) > max_length:
        return _fail(
            ValidationErrorKind.TOO_LONG,
            f"Input exceeds maximum length of {max_length} characters",
        )

    if _has_traversal(value):
        return _fail(ValidationErrorKind.TRAVERSAL_ATTEMPT, "Invalid characters detected in path")

    if not _ALLOWED.fullmatch(value):
        return _fail(
            ValidationErrorKind.DISALLOWED_CHARACTERS,
            "Path contains invalid characters. Only alphanumeric, hyphens, "
            "underscores, and dots are allowed",
        )

    return SanitizeResult(value=value)


def is_within_base(candidate: str | os.PathLike[str], base: str | os.PathLike[str]) -> bool:
    """True if ``candidate`` resolves to ``base`` itself or somewhere beneath it."""
    if "\0" in os.fspath(candidate) or "\0" in os.fspath(base):
        return False
    try:
        resolved_base = str(Path(base).resolve())
        resolved = str(Path(candidate).resolve())
    except (OSError, RuntimeError, ValueError):
        # Symlink loop or unresolvable path: cannot be proven to be inside base.
        return False
    return resolved == resolved_base or resolved.startswith(resolved_base + os.sep)


def resolve_within(
    base: Path,
    identifier: object,
    *,
    suffix: str = "",
    field: str = "name",
    max_length: int = 50,
) -> Path:
    """Sanitize ``identifier`` and return ``base/<identifier><suffix>``.

    Raises:
        UIContextError: INVALID_INPUT when the identifier is rejected or the
            assembled path escapes ``base``. The path is never included.
    """
    result = sanitize_identifier(identifier, max_length)
    if result.value is None:
        raise UIContextError(
            ErrorCode.INVALID_INPUT,
            f"Invalid {field}: {result.message}",
        )

    candidate = base / f"{result.value}{suffix}"
    if not is_within_base(candidate, base):
        log.warning("boundary_violation", field=field)
        raise UIContextError(
            ErrorCode.INVALID_INPUT,
            f"Invalid {field}: resolved path is outside the allowed directory",
        )
    return candidate.resolve()
