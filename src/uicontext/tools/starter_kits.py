"""Starter-kit catalog tools: lookup, listing and recommendations."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import structlog

from uicontext.errors import ErrorCode, UIContextError
from uicontext.recommend import criteria_from_answers, format_recommendations, score_templates
from uicontext.security import sanitize_identifier

if TYPE_CHECKING:
    from uicontext.models.templates import RecommendationCriteria, TemplateRecord
    from uicontext.models.tools import (
        GetStarterKitInput,
        QuestionnaireInput,
        RecommendTemplateInput,
    )
    from uicontext.state import AppState

log = structlog.get_logger()

TOP_RECOMMENDATIONS = 3


def _format_record(record: TemplateRecord) -> str:
    out = [f"# {record.name}", "", f"**ID:** `{record.id}`"]
    if record.complexity:
        out.append(f"**Complexity:** {record.complexity}")
    if record.animations:
        out.append(f"**Animations:** {record.animations}")
    if record.color_scheme:
        out.append(f"**Color scheme:** {record.color_scheme}")
    if record.description:
        out += ["", record.description]
    if record.use_cases:
        out += ["", "## Use Cases"]
        out.extend(f"- {use_case}" for use_case in record.use_cases)
    if record.features:
        out += ["", "## Features"]
        out.extend(f"- {feature}" for feature in record.features)
    if record.architectural_decisions:
        out += ["", "## Architectural Decisions", "```json"]
        out.append(json.dumps(record.architectural_decisions, indent=2))
        out.append("```")
    if record.recommended_libraries:
        out += ["", "## Recommended Libraries", "```json"]
        libraries = record.recommended_libraries
        if not isinstance(libraries, dict):
            libraries = list(libraries)
        out.append(json.dumps(libraries, indent=2))
        out.append("```")
    return "\n".join(out)


def get_starter_kit(params: GetStarterKitInput, state: AppState) -> str:
    result = sanitize_identifier(params.kit_id)
    if result.value is None:
        raise UIContextError(ErrorCode.INVALID_INPUT, f"Invalid kit_id: {result.message}")

    record = state.catalog.get(result.value)
    if record is None:
        raise UIContextError(
            ErrorCode.NOT_FOUND,
            f"Starter kit '{result.value}' not found.",
            suggestion="Use list_starter_kits to see available starter kits.",
        )
    return _format_record(record)


def list_starter_kits(state: AppState) -> str:
    templates = state.catalog.templates
    out = [f"# Starter Kits ({len(templates)} available)", ""]
    for record in templates:
        line = f"- **{record.name}** (`{record.id}`)"
        if record.complexity:
            line += f" [{record.complexity}]"
        if record.description:
            line += f": {record.description}"
        out.append(line)
    out.append("")
    out.append(
        "Use get_starter_kit with kit_id for details, or recommend_template to find "
        "the best match for your project."
    )
    return "\n".join(out)


def _recommend(criteria: RecommendationCriteria, state: AppState) -> str:
    results = score_templates(state.catalog.templates, state.catalog.matching, criteria)
    log.info(
        "templates_scored",
        matches=len(results),
        top=[r.record.id for r in results[:TOP_RECOMMENDATIONS]],
    )
    return format_recommendations(results, top=TOP_RECOMMENDATIONS)


def recommend_template(params: RecommendTemplateInput, state: AppState) -> str:
    return _recommend(params, state)


def template_questionnaire(params: QuestionnaireInput, state: AppState) -> str:
    return _recommend(criteria_from_answers(params.answers), state)
