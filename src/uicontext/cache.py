"""In-memory content cache with a freshness window.

Entries map a resolved absolute path to the text last read from it. An entry
younger than ``ttl_seconds`` is served without touching the disk; an older one
is re-read and replaced. Only successful reads are stored: a missing,
oversized or unreadable file never creates or alters an entry, and neither
does a read whose caller was cancelled before it completed.

Reads of the same key are serialized by a per-key ``asyncio.Lock``. Callers
that queued behind an in-flight read find the entry it published and return
it without a second disk read. A key's lock lives only while some caller
holds or awaits it, so failed reads leave nothing behind.

The entry count is bounded; the least recently used entry is evicted first.
"""

from __future__ import annotations

import asyncio
import time
from collections import OrderedDict
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from uicontext.models.content import CacheEntry, ReadErrorKind, ReadResult
from uicontext.reader import read_text

if TYPE_CHECKING:
    import os
    from collections.abc import Awaitable, Callable

    Reader = Callable[[Path, int], Awaitable[ReadResult]]

log = structlog.get_logger()


class ContentCache:
    """Read-through cache of file contents keyed by resolved path."""

    def __init__(
        self,
        ttl_seconds: float = 300.0,
        max_entries: int = 256,
        *,
        reader: Reader = read_text,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._reader = reader
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._locks: dict[str, asyncio.Lock] = {}
        self._lock_users: dict[str, int] = {}  # callers holding or awaiting each lock

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, path: str | os.PathLike[str], max_bytes: int) -> ReadResult:
        """Return the content of ``path``, reading it only when not fresh in cache."""
        key = str(path)

        hit = self._serve_fresh(key, max_bytes)
        if hit is not None:
            return hit

        lock = self._locks.setdefault(key, asyncio.Lock())
        self._lock_users[key] = self._lock_users.get(key, 0) + 1
        try:
            async with lock:
                # Another caller may have refreshed the entry while we waited.
                hit = self._serve_fresh(key, max_bytes)
                if hit is not None:
                    return hit

                log.debug("cache_miss", key=key)
                result = await self._reader(Path(key), max_bytes)
                if result.content is not None:
                    size = result.size
                    if size is None:
                        size = len(result.content.encode())
                    self._store(
                        CacheEntry(
                            path=key, content=result.content, size=size, read_at=self._clock()
                        )
                    )
                return result
        finally:
            self._release_lock(key)

    def invalidate(self, path: str | os.PathLike[str] | None = None) -> None:
        """Drop one entry, or every entry when ``path`` is None."""
        if path is None:
            self._entries.clear()
            return
        self._entries.pop(str(path), None)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _serve_fresh(self, key: str, max_bytes: int) -> ReadResult | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.read_at >= self._ttl:
            return None
        self._entries.move_to_end(key)
        if entry.size > max_bytes:
            return ReadResult.failure(ReadErrorKind.TOO_LARGE, size=entry.size)
        log.debug("cache_hit", key=key)
        return ReadResult.success(entry.content, size=entry.size, cached=True)

    def _store(self, entry: CacheEntry) -> None:
        self._entries[entry.path] = entry
        self._entries.move_to_end(entry.path)
        while len(self._entries) > self._max_entries:
            evicted, _ = self._entries.popitem(last=False)
            log.debug("cache_evict", key=evicted)

    def _release_lock(self, key: str) -> None:
        users = self._lock_users[key] - 1
        if users:
            self._lock_users[key] = users
            return
        # Nobody holds or awaits the lock; the next reader of ``key`` makes a new one.
        del self._lock_users[key]
        del self._locks[key]
