"""Helpers shared by the file-backed tools."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from uicontext.errors import ErrorCode, UIContextError, internal_error
from uicontext.models.content import ReadErrorKind

if TYPE_CHECKING:
    from pathlib import Path

    from uicontext.state import AppState

log = structlog.get_logger()


async def read_content(
    state: AppState,
    path: Path,
    max_bytes: int,
    *,
    tool: str,
    not_found: UIContextError,
) -> str:
    """Fetch ``path`` through the cache, raising ``UIContextError`` on any failure."""
    result = await state.cache.get(path, max_bytes)
    if result.content is not None:
        return result.content

    if result.error is ReadErrorKind.NOT_FOUND:
        raise not_found
    if result.error is ReadErrorKind.TOO_LARGE:
        raise UIContextError(
            ErrorCode.CONTENT_TOO_LARGE,
            f"The requested content exceeds the size limit of {max_bytes:,} bytes.",
        )
    log.error("content_read_failed", tool=tool, kind=str(result.error))
    raise internal_error(tool)


def list_names(directory: Path, suffix: str) -> list[str]:
    """Sorted file stems in ``directory`` with ``suffix``; empty if the directory is absent."""
    if not directory.is_dir():
        return []
    return sorted(
        p.name[: -len(suffix)]
        for p in directory.iterdir()
        if p.name.endswith(suffix) and p.is_file()
    )


def heading(category: str) -> str:
    return category[:1].upper() + category[1:]
