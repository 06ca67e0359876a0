from __future__ import annotations

from uicontext.models.content import CacheEntry, ReadErrorKind, ReadResult
from uicontext.models.templates import (
    MatchingProfile,
    RecommendationCriteria,
    ScoredResult,
    TemplateRecord,
)
from uicontext.models.tools import (
    PATTERN_CATEGORIES,
    DocSet,
    GetComponentInput,
    GetLibraryDocsInput,
    GetPatternInput,
    GetStarterKitInput,
    PatternCategory,
    QuestionnaireInput,
    RecommendTemplateInput,
    SearchDocsInput,
)

__all__ = [
    # content
    "CacheEntry",
    "ReadErrorKind",
    "ReadResult",
    # templates
    "TemplateRecord",
    "MatchingProfile",
    "RecommendationCriteria",
    "ScoredResult",
    # tools
    "DocSet",
    "PatternCategory",
    "PATTERN_CATEGORIES",
    "SearchDocsInput",
    "GetComponentInput",
    "GetPatternInput",
    "GetLibraryDocsInput",
    "GetStarterKitInput",
    "RecommendTemplateInput",
    "QuestionnaireInput",
]
