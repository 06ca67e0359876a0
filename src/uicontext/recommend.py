"""Weighted matching of starter-kit templates against caller preferences.

Each matched dimension adds a fixed number of points (100 in total across
all five). The sum is then scaled by the weight of the dimensions the caller
actually supplied, so a template that satisfies every stated preference
scores 100 even when some preferences were left out. Scoring is pure and
deterministic: ties keep the catalog order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from uicontext.models.templates import RecommendationCriteria, ScoredResult

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from uicontext.models.templates import MatchingProfile, TemplateRecord

PURPOSE_WEIGHT = 40
ANIMATIONS_WEIGHT = 20
COLOR_WEIGHT = 15
FEATURES_WEIGHT = 15
COMPLEXITY_WEIGHT = 10


def _matches(value: str | None, tags: frozenset[str]) -> bool:
    return value is not None and value.strip().lower() in tags


def max_score(criteria: RecommendationCriteria) -> int:
    """Points available for the dimensions present in ``criteria``."""
    total = 0
    if criteria.purpose:
        total += PURPOSE_WEIGHT
    if criteria.animations:
        total += ANIMATIONS_WEIGHT
    if criteria.color_preference:
        total += COLOR_WEIGHT
    if criteria.features:
        total += FEATURES_WEIGHT
    if criteria.complexity:
        total += COMPLEXITY_WEIGHT
    return total


def score_template(
    profile: MatchingProfile, criteria: RecommendationCriteria
) -> tuple[int, list[str]]:
    available = max_score(criteria)
    if available == 0:
        return 0, []

    score = 0.0
    reasons: list[str] = []

    if _matches(criteria.purpose, profile.purpose):
        score += PURPOSE_WEIGHT
        reasons.append(f"Perfect for {criteria.purpose} projects")

    if _matches(criteria.animations, profile.animations):
        score += ANIMATIONS_WEIGHT
        reasons.append(f"Offers {criteria.animations} animations")

    if _matches(criteria.color_preference, profile.color_preference):
        score += COLOR_WEIGHT
        reasons.append(f"Matches your {criteria.color_preference} color preference")

    if criteria.features:
        matched = sum(1 for f in criteria.features if f in profile.features)
        if matched:
            score += FEATURES_WEIGHT * matched / len(criteria.features)
            reasons.append(f"Includes {matched} of {len(criteria.features)} requested features")

    if _matches(criteria.complexity, profile.complexity):
        score += COMPLEXITY_WEIGHT
        reasons.append(f"Suits {criteria.complexity} complexity")

    # Round half up; scores are never negative.
    return int(score * 100 / available + 0.5), reasons


def score_templates(
    records: Iterable[TemplateRecord],
    profiles: Mapping[str, MatchingProfile],
    criteria: RecommendationCriteria,
) -> list[ScoredResult]:
    """Score every profiled record and return non-zero results, best first."""
    results: list[ScoredResult] = []
    for record in records:
        profile = profiles.get(record.id)
        if profile is None:
            continue
        score, reasons = score_template(profile, criteria)
        if score > 0:
            results.append(ScoredResult(record=record, score=score, reasons=tuple(reasons)))
    # sorted() is stable, so equal scores keep catalog order.
    return sorted(results, key=lambda r: r.score, reverse=True)


_ANSWER_KEYS = {
    "purpose": "purpose",
    "colorpreference": "color_preference",
    "color_preference": "color_preference",
    "color": "color_preference",
    "animations": "animations",
    "features": "features",
    "complexity": "complexity",
}


def criteria_from_answers(answers: Mapping[str, Any]) -> RecommendationCriteria:
    """Map questionnaire answers onto RecommendationCriteria; unknown keys are ignored."""
    fields: dict[str, Any] = {}
    for key, value in answers.items():
        field = _ANSWER_KEYS.get(key.strip().lower())
        if field is None:
            continue
        if field != "features" and isinstance(value, list):
            value = value[0] if value else None
        fields[field] = value
    return RecommendationCriteria.model_validate(fields)


def format_recommendations(results: list[ScoredResult], top: int = 3) -> str:
    if not results:
        return (
            "No templates matched your preferences. Try fewer or different criteria, "
            "or use list_starter_kits to browse every starter kit."
        )

    lines = ["# Recommended Starter Kits", ""]
    for rank, result in enumerate(results[:top], start=1):
        record = result.record
        lines.append(f"## {rank}. {record.name} (`{record.id}`): {result.score}% match")
        if record.description:
            lines.append("")
            lines.append(record.description)
        lines.append("")
        lines.append("**Why it fits:**")
        lines.extend(f"- {reason}" for reason in result.reasons)
        lines.append("")
    lines.append("Use get_starter_kit with kit_id to see the full details.")
    return "\n".join(lines)
