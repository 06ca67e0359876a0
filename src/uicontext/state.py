"""Process-wide state shared by every tool handler.

Built once in the server lifespan and passed to handlers explicitly, so tests
can construct one over a temporary content tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from uicontext.cache import ContentCache
from uicontext.catalog import TemplateCatalog, load_catalog

if TYPE_CHECKING:
    from pathlib import Path

    from uicontext.config import Settings


@dataclass
class AppState:
    settings: Settings
    cache: ContentCache
    catalog: TemplateCatalog = field(default_factory=TemplateCatalog)

    def content_path(self, relative: str) -> Path:
        return self.settings.content.resolve(relative).resolve()


def build_state(settings: Settings) -> AppState:
    cache = ContentCache(
        ttl_seconds=settings.cache.ttl_seconds,
        max_entries=settings.cache.max_entries,
    )
    catalog = load_catalog(settings.content.resolve(settings.content.templates_file))
    return AppState(settings=settings, cache=cache, catalog=catalog)
