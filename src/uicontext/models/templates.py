from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_RECORD_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class TemplateRecord(BaseModel):
    """One starter kit from templates.json. Keys are camelCase on disk."""

    model_config = _RECORD_CONFIG

    id: str
    name: str
    description: str = ""
    use_cases: tuple[str, ...] = ()
    complexity: str = ""
    animations: str = ""
    color_scheme: str = ""
    features: tuple[str, ...] = ()
    architectural_decisions: dict[str, Any] = Field(default_factory=dict)
    recommended_libraries: dict[str, Any] | tuple[str, ...] = ()


class MatchingProfile(BaseModel):
    """Precomputed tag sets used to score a TemplateRecord against criteria."""

    model_config = _RECORD_CONFIG

    purpose: frozenset[str] = frozenset()
    color_preference: frozenset[str] = frozenset()
    animations: frozenset[str] = frozenset()
    features: frozenset[str] = frozenset()
    complexity: frozenset[str] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def normalise_tags(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = [v]
        if isinstance(v, list | tuple | set | frozenset):
            return frozenset(str(tag).strip().lower() for tag in v)
        return v


class RecommendationCriteria(BaseModel):
    """Caller preferences. Every field is optional."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    purpose: str | None = None
    color_preference: str | None = None
    animations: str | None = None
    features: tuple[str, ...] = ()
    complexity: str | None = None

    @field_validator("purpose", "color_preference", "animations", "complexity", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("features", mode="before")
    @classmethod
    def dedupe_features(cls, v: Any) -> Any:
        if v is None:
            return ()
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, list | tuple | set | frozenset):
            seen: dict[str, None] = {}
            for item in v:
                feature = str(item).strip().lower()
                if feature:
                    seen.setdefault(feature, None)
            return tuple(seen)
        return v

    def is_empty(self) -> bool:
        return not (
            self.purpose
            or self.color_preference
            or self.animations
            or self.features
            or self.complexity
        )


class ScoredResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    record: TemplateRecord
    score: int  # 0–100
    reasons: tuple[str, ...]
