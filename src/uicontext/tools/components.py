"""Catalyst UI component tools."""

from __future__ import annotations

from typing import TYPE_CHECKING

from uicontext.errors import ErrorCode, UIContextError
from uicontext.security import resolve_within
from uicontext.tools._content import heading, list_names, read_content

if TYPE_CHECKING:
    from uicontext.models.tools import GetComponentInput
    from uicontext.state import AppState

COMPONENT_SUFFIX = ".tsx"

COMPONENT_CATEGORIES: dict[str, tuple[str, ...]] = {
    "forms": (
        "button", "checkbox", "fieldset", "input", "radio", "select", "switch", "textarea",
    ),
    "navigation": ("navbar", "sidebar", "sidebar-layout", "dropdown", "link"),
    "layout": ("divider", "heading", "stacked-layout", "auth-layout"),
    "feedback": ("alert", "badge", "dialog"),
    "data-display": ("avatar", "description-list", "listbox", "pagination", "table", "text"),
    "advanced": ("combobox",),
}


async def get_component(params: GetComponentInput, state: AppState) -> str:
    base = state.content_path(state.settings.content.components_dir)
    path = resolve_within(
        base, params.component_name, suffix=COMPONENT_SUFFIX, field="component_name"
    )
    content = await read_content(
        state,
        path,
        state.settings.limits.max_file_bytes,
        tool="get_catalyst_component",
        not_found=UIContextError(
            ErrorCode.NOT_FOUND,
            f"Catalyst component '{params.component_name}' not found.",
            suggestion="Use list_catalyst_components to see available components.",
        ),
    )
    return f"# Catalyst UI Component: {params.component_name}\n\n```typescript\n{content}\n```"


def list_components(state: AppState) -> str:
    base = state.content_path(state.settings.content.components_dir)
    available = list_names(base, COMPONENT_SUFFIX)

    out = [f"# Catalyst UI Components ({len(available)} total)", ""]
    out.append(
        "All components are TypeScript React components with Tailwind CSS styling "
        "and Headless UI integration."
    )
    out.append("")

    categorised: set[str] = set()
    for category, names in COMPONENT_CATEGORIES.items():
        present = [name for name in names if name in available]
        categorised.update(present)
        if present:
            out.append(f"## {heading(category)}")
            out.extend(f"- {name}" for name in present)
            out.append("")

    other = [name for name in available if name not in categorised]
    if other:
        out.append("## Other")
        out.extend(f"- {name}" for name in other)
        out.append("")

    out.append("Use get_catalyst_component with component_name to retrieve the source code.")
    return "\n".join(out)
