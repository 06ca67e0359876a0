"""Next.js / Tailwind full-documentation and search tools, plus the content summary."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from uicontext.errors import ErrorCode, UIContextError
from uicontext.models.content import ReadErrorKind
from uicontext.search import format_search_results, search_content
from uicontext.tools._content import read_content

if TYPE_CHECKING:
    from uicontext.models.tools import DocSet, SearchDocsInput
    from uicontext.state import AppState

log = structlog.get_logger()


@dataclass(frozen=True)
class DocSetInfo:
    label: str
    setting: str  # Field on ContentSettings holding the relative path
    full_tool: str
    search_tool: str


DOC_SETS: dict[str, DocSetInfo] = {
    "nextjs": DocSetInfo(
        label="Next.js",
        setting="nextjs_docs",
        full_tool="get_nextjs_full_docs",
        search_tool="search_nextjs_docs",
    ),
    "tailwind": DocSetInfo(
        label="Tailwind CSS",
        setting="tailwind_docs",
        full_tool="get_tailwind_full_docs",
        search_tool="search_tailwind_docs",
    ),
}


async def _load(doc_set: DocSet, state: AppState, tool: str) -> str:
    info = DOC_SETS[doc_set]
    path = state.content_path(getattr(state.settings.content, info.setting))
    return await read_content(
        state,
        path,
        state.settings.limits.large_file_bytes,
        tool=tool,
        not_found=UIContextError(
            ErrorCode.NOT_FOUND,
            f"{info.label} documentation is not available on this server.",
            suggestion="Check the content directory configuration.",
        ),
    )


async def get_full_docs(doc_set: DocSet, state: AppState) -> str:
    info = DOC_SETS[doc_set]
    return await _load(doc_set, state, info.full_tool)


async def search_docs(doc_set: DocSet, params: SearchDocsInput, state: AppState) -> str:
    info = DOC_SETS[doc_set]
    content = await _load(doc_set, state, info.search_tool)
    excerpts = list(search_content(content, params.query, params.limit))
    log.info("docs_search", doc_set=doc_set, results=len(excerpts))
    return format_search_results(excerpts, params.query, info.full_tool)


async def get_content_summary(state: AppState) -> str:
    """The content-summary.json resource. A JSON error object when unavailable."""
    path = state.content_path(state.settings.content.summary_file)
    result = await state.cache.get(path, state.settings.limits.max_file_bytes)
    if result.content is not None:
        return result.content
    if result.error is not ReadErrorKind.NOT_FOUND:
        log.warning("content_summary_unreadable", kind=str(result.error))
    return json.dumps(
        {
            "error": "Content summary not available",
            "message": "Content summary file not found",
        },
        indent=2,
    )
