"""Third-party library documentation tools."""

from __future__ import annotations

from typing import TYPE_CHECKING

from uicontext.errors import ErrorCode, UIContextError
from uicontext.security import resolve_within
from uicontext.tools._content import list_names, read_content

if TYPE_CHECKING:
    from uicontext.models.tools import GetLibraryDocsInput
    from uicontext.state import AppState

LIBRARY_SUFFIX = ".md"


async def get_library_docs(params: GetLibraryDocsInput, state: AppState) -> str:
    base = state.content_path(state.settings.content.libraries_dir)
    path = resolve_within(base, params.library_name, suffix=LIBRARY_SUFFIX, field="library_name")
    return await read_content(
        state,
        path,
        state.settings.limits.max_file_bytes,
        tool="get_library_docs",
        not_found=UIContextError(
            ErrorCode.NOT_FOUND,
            f"Library documentation for '{params.library_name}' not found.",
            suggestion="Use list_library_docs to see available libraries.",
        ),
    )


def list_library_docs(state: AppState) -> str:
    names = list_names(state.content_path(state.settings.content.libraries_dir), LIBRARY_SUFFIX)
    out = [f"# Library Documentation ({len(names)} available)", ""]
    out.extend(f"- {name}" for name in names)
    out.append("")
    out.append("Use get_library_docs with library_name to retrieve a library's documentation.")
    return "\n".join(out)
