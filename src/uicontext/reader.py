"""Size-limited file reads.

The reported size is checked before the file is opened, so oversized files
are rejected without reading a single byte. Failures are returned as
``ReadResult`` values; missing files are reported distinctly from other I/O
errors so the tool layer can answer "not found" instead of "internal error".
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog

from uicontext.models.content import ReadErrorKind, ReadResult

if TYPE_CHECKING:
    from pathlib import Path

log = structlog.get_logger()

_MISSING = (FileNotFoundError, NotADirectoryError)


def read_text_sync(path: Path, max_bytes: int) -> ReadResult:
    try:
        size = path.stat().st_size
    except _MISSING:
        return ReadResult.failure(ReadErrorKind.NOT_FOUND)
    except OSError:
        log.warning("file_stat_error", exc_info=True)
        return ReadResult.failure(ReadErrorKind.READ_ERROR)

    if size > max_bytes:
        return ReadResult.failure(ReadErrorKind.TOO_LARGE, size=size)

    try:
        with path.open("rb") as fh:
            # One extra byte detects a file that grew since stat().
            data = fh.read(max_bytes + 1)
    except _MISSING:
        return ReadResult.failure(ReadErrorKind.NOT_FOUND)
    except OSError:
        log.warning("file_read_error", exc_info=True)
        return ReadResult.failure(ReadErrorKind.READ_ERROR)

    if len(data) > max_bytes:
        return ReadResult.failure(ReadErrorKind.TOO_LARGE, size=len(data))

    try:
        content = data.decode("utf-8")
    except UnicodeDecodeError:
        log.warning("file_decode_error", size=len(data))
        return ReadResult.failure(ReadErrorKind.READ_ERROR)

    return ReadResult.success(content, size=len(data))


async def read_text(path: Path, max_bytes: int) -> ReadResult:
    """Read ``path`` as UTF-8 text in a worker thread, enforcing ``max_bytes``."""
    return await asyncio.to_thread(read_text_sync, path, max_bytes)
