"""Shared fixtures: a small on-disk content tree and matching settings.

Unit and integration fixtures build on these (see tests/unit/conftest.py and
tests/integration/conftest.py).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from uicontext.config import ContentSettings, LimitSettings, Settings

if TYPE_CHECKING:
    from pathlib import Path

NEXTJS_DOCS = "\n".join(
    [
        "# Next.js Docs",
        "",
        "## Routing Fundamentals",
        "The App Router uses file-system based routing.",
        "Folders define routes.",
        "",
        "## Layouts",
        "A layout is UI shared between routes.",
        "",
        "## Data Fetching",
        "Server Components fetch data on the server.",
        "",
        "## Dynamic Routing",
        "Dynamic segments are wrapped in brackets.",
    ]
)

TAILWIND_DOCS = "\n".join(
    [
        "# Tailwind CSS",
        "Utility classes such as p-4 add padding.",
        "Use dark: variants for dark mode.",
    ]
)

SAMPLE_TEMPLATES: dict[str, Any] = {
    "templates": [
        {
            "id": "salient",
            "name": "Salient",
            "description": "SaaS marketing site",
            "useCases": ["saas landing page"],
            "complexity": "simple",
            "animations": "subtle",
            "colorScheme": "vibrant",
            "features": ["pricing", "testimonials"],
            "architecturalDecisions": {"routing": "app router"},
            "recommendedLibraries": ["headlessui"],
        },
        {
            "id": "catalyst-dashboard",
            "name": "Catalyst Dashboard",
            "description": "Application shell for admin dashboards",
            "useCases": ["admin dashboard"],
            "complexity": "advanced",
            "animations": "minimal",
            "colorScheme": "professional",
            "features": ["auth", "darkmode", "tables"],
        },
        {
            "id": "studio",
            "name": "Studio",
            "description": "Agency portfolio",
            "complexity": "intermediate",
            "animations": "rich",
            "colorScheme": "professional",
            "features": ["darkmode"],
        },
        {
            "id": "unprofiled",
            "name": "Unprofiled",
        },
    ],
    "matching": {
        "salient": {
            "purpose": ["saas", "marketing"],
            "colorPreference": ["vibrant"],
            "animations": ["subtle"],
            "features": ["pricing", "testimonials"],
            "complexity": ["simple"],
        },
        "catalyst-dashboard": {
            "purpose": ["dashboard", "admin"],
            "colorPreference": ["professional", "neutral"],
            "animations": ["minimal"],
            "features": ["auth", "darkmode", "tables"],
            "complexity": ["advanced"],
        },
        "studio": {
            "purpose": ["portfolio", "agency"],
            "colorPreference": ["professional"],
            "animations": ["rich"],
            "features": ["darkmode"],
            "complexity": ["intermediate"],
        },
    },
}


@pytest.fixture()
def content_dir(tmp_path: Path) -> Path:
    """A complete content tree under tmp_path/content."""
    root = tmp_path / "content"

    (root / "docs" / "nextjs").mkdir(parents=True)
    (root / "docs" / "nextjs" / "nextjs-full.txt").write_text(NEXTJS_DOCS, encoding="utf-8")
    (root / "docs" / "tailwind").mkdir(parents=True)
    (root / "docs" / "tailwind" / "tailwind-docs-full.txt").write_text(
        TAILWIND_DOCS, encoding="utf-8"
    )

    components = root / "components" / "catalyst"
    components.mkdir(parents=True)
    for name in ("button", "dialog", "table", "sparkline"):
        (components / f"{name}.tsx").write_text(
            f"export function {name.title()}() {{ return null }}\n", encoding="utf-8"
        )
    (components / "README.txt").write_text("not a component", encoding="utf-8")

    for category, names in {"layouts": ["app-header"], "pages": ["pricing-page"]}.items():
        directory = root / "patterns" / category
        directory.mkdir(parents=True)
        for name in names:
            (directory / f"{name}.md").write_text(f"# {name}\n", encoding="utf-8")

    libraries = root / "libraries"
    libraries.mkdir()
    (libraries / "framer-motion.md").write_text("# Framer Motion\n", encoding="utf-8")

    (root / "templates").mkdir()
    (root / "templates" / "templates.json").write_text(
        json.dumps(SAMPLE_TEMPLATES), encoding="utf-8"
    )
    (root / "content-summary.json").write_text('{"components": 4}', encoding="utf-8")
    return root


@pytest.fixture()
def settings(content_dir: Path) -> Settings:
    return Settings(
        content=ContentSettings(base_dir=str(content_dir)),
        limits=LimitSettings(max_file_bytes=1024, large_file_bytes=4096),
    )
