from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class ReadErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    TOO_LARGE = "too_large"
    READ_ERROR = "read_error"


class CacheEntry(BaseModel):
    """Last-read content for one resolved path."""

    model_config = ConfigDict(frozen=True)

    path: str  # Resolved absolute path (cache key)
    content: str
    size: int  # Bytes on disk when read
    read_at: float  # Clock reading at the time of the read, in seconds


class ReadResult(BaseModel):
    """Outcome of reading a file, directly or through the cache.

    Exactly one of ``content`` and ``error`` is set.
    """

    model_config = ConfigDict(frozen=True)

    content: str | None = None
    error: ReadErrorKind | None = None
    size: int | None = None  # Reported size in bytes, when known
    cached: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, content: str, *, size: int | None = None, cached: bool = False) -> ReadResult:
        return cls(content=content, size=size, cached=cached)

    @classmethod
    def failure(cls, error: ReadErrorKind, *, size: int | None = None) -> ReadResult:
        return cls(error=error, size=size)
