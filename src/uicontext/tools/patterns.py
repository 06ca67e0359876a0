"""Abstracted layout / page / feature pattern tools."""

from __future__ import annotations

from typing import TYPE_CHECKING

from uicontext.errors import ErrorCode, UIContextError
from uicontext.models.tools import PATTERN_CATEGORIES
from uicontext.security import resolve_within
from uicontext.tools._content import heading, list_names, read_content

if TYPE_CHECKING:
    from uicontext.models.tools import GetPatternInput
    from uicontext.state import AppState

PATTERN_SUFFIX = ".md"


async def get_pattern(params: GetPatternInput, state: AppState) -> str:
    # category is a closed Literal, so joining it before the boundary check is safe.
    base = state.content_path(state.settings.content.patterns_dir) / params.category
    path = resolve_within(base, params.pattern_name, suffix=PATTERN_SUFFIX, field="pattern_name")
    return await read_content(
        state,
        path,
        state.settings.limits.max_file_bytes,
        tool="get_pattern",
        not_found=UIContextError(
            ErrorCode.NOT_FOUND,
            f"Pattern '{params.pattern_name}' not found in category '{params.category}'.",
            suggestion="Use list_patterns to see available patterns.",
        ),
    )


def list_patterns(state: AppState) -> str:
    base = state.content_path(state.settings.content.patterns_dir)
    out = [
        "# Available Abstracted Patterns",
        "",
        "Patterns abstracted from professional Next.js templates. "
        "Focus on common architectural approaches.",
        "",
    ]
    for category in PATTERN_CATEGORIES:
        names = list_names(base / category, PATTERN_SUFFIX)
        if names:
            out.append(f"## {heading(category)}")
            out.extend(f"- {name}" for name in names)
            out.append("")
    out.append("Use get_pattern with category and pattern_name to retrieve the full documentation.")
    return "\n".join(out)
