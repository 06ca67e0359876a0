"""Starter-kit catalog: loaded once from templates.json, read-only afterwards.

File layout::

    {
      "templates": [{"id": "...", "name": "...", "useCases": [...], ...}],
      "matching": {"<id>": {"purpose": [...], "colorPreference": [...], ...}}
    }
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from pydantic import BaseModel, ConfigDict, Field, model_validator

from uicontext.models.templates import MatchingProfile, TemplateRecord

if TYPE_CHECKING:
    from pathlib import Path

log = structlog.get_logger()


class TemplateCatalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    templates: tuple[TemplateRecord, ...] = ()
    matching: dict[str, MatchingProfile] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_unique_ids(self) -> TemplateCatalog:
        seen: set[str] = set()
        for record in self.templates:
            if record.id in seen:
                raise ValueError(f"Duplicate template id: {record.id!r}")
            seen.add(record.id)
        return self

    def get(self, template_id: str) -> TemplateRecord | None:
        for record in self.templates:
            if record.id == template_id:
                return record
        return None


def load_catalog(path: Path) -> TemplateCatalog:
    """Load and validate the catalog file.

    A missing file yields an empty catalog (the starter-kit tools then report
    nothing available). A malformed file raises ``pydantic.ValidationError``.
    """
    if not path.is_file():
        log.warning("template_catalog_missing")
        return TemplateCatalog()

    catalog = TemplateCatalog.model_validate_json(path.read_bytes())
    unprofiled = [r.id for r in catalog.templates if r.id not in catalog.matching]
    log.info(
        "template_catalog_loaded",
        templates=len(catalog.templates),
        profiles=len(catalog.matching),
        unprofiled=unprofiled,
    )
    return catalog
