from __future__ import annotations

import re
from typing import Any, Literal

from pydantic import BaseModel, field_validator

from uicontext.models.templates import RecommendationCriteria

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")

PatternCategory = Literal["layouts", "pages", "features"]
PATTERN_CATEGORIES: tuple[str, ...] = ("layouts", "pages", "features")

DocSet = Literal["nextjs", "tailwind"]


class SearchDocsInput(BaseModel):
    query: str
    limit: int = 5

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        if len(v) < 2:
            raise ValueError("Search query must be at least 2 characters")
        if len(v) > 100:
            raise ValueError("Search query exceeds maximum length of 100 characters")
        if _CONTROL_CHARS.search(v):
            raise ValueError("Search query contains invalid characters")
        return v

    @field_validator("limit")
    @classmethod
    def validate_limit(cls, v: int) -> int:
        if v < 1 or v > 20:
            raise ValueError("Limit must be a number between 1 and 20")
        return v


# Identifier fields are checked for presence and type here; content rules
# (length, traversal, allowed characters) belong to security.sanitize_identifier,
# which runs again when the path is resolved.


class GetComponentInput(BaseModel):
    component_name: str


class GetPatternInput(BaseModel):
    category: PatternCategory
    pattern_name: str


class GetLibraryDocsInput(BaseModel):
    library_name: str


class GetStarterKitInput(BaseModel):
    kit_id: str


class RecommendTemplateInput(RecommendationCriteria):
    pass


class QuestionnaireInput(BaseModel):
    answers: dict[str, Any]

    @field_validator("answers")
    @classmethod
    def validate_answers(cls, v: dict[str, Any]) -> dict[str, Any]:
        for key, value in v.items():
            if not isinstance(value, str | list):
                raise ValueError(f"Answer to {key!r} must be a string or a list of strings")
        return v
