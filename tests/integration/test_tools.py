"""Tool handlers end to end over a real content tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from uicontext.errors import ErrorCode, UIContextError
from uicontext.models.tools import (
    GetComponentInput,
    GetLibraryDocsInput,
    GetPatternInput,
    GetStarterKitInput,
    QuestionnaireInput,
    RecommendTemplateInput,
    SearchDocsInput,
)
from uicontext.tools import components, docs, libraries, patterns, starter_kits

if TYPE_CHECKING:
    from pathlib import Path

    from uicontext.state import AppState


# ---------------------------------------------------------------------------
# Documentation
# ---------------------------------------------------------------------------


class TestDocs:
    async def test_full_docs(self, app_state: AppState) -> None:
        text = await docs.get_full_docs("nextjs", app_state)
        assert text.startswith("# Next.js Docs")

    async def test_full_docs_served_from_cache_on_second_call(self, app_state: AppState) -> None:
        await docs.get_full_docs("tailwind", app_state)
        assert len(app_state.cache) == 1
        await docs.get_full_docs("tailwind", app_state)
        assert len(app_state.cache) == 1

    async def test_full_docs_too_large(self, app_state: AppState, content_dir: Path) -> None:
        (content_dir / "docs" / "nextjs" / "nextjs-full.txt").write_bytes(b"x" * 5000)
        with pytest.raises(UIContextError) as exc_info:
            await docs.get_full_docs("nextjs", app_state)
        assert exc_info.value.code is ErrorCode.CONTENT_TOO_LARGE
        assert len(app_state.cache) == 0

    async def test_full_docs_missing(self, app_state: AppState, content_dir: Path) -> None:
        (content_dir / "docs" / "tailwind" / "tailwind-docs-full.txt").unlink()
        with pytest.raises(UIContextError) as exc_info:
            await docs.get_full_docs("tailwind", app_state)
        assert exc_info.value.code is ErrorCode.NOT_FOUND
        assert str(content_dir) not in exc_info.value.message

    async def test_search(self, app_state: AppState) -> None:
        params = SearchDocsInput(query="routing", limit=5)
        text = await docs.search_docs("nextjs", params, app_state)
        assert text.startswith('Found 2 result(s) for "routing"')
        assert "## Routing Fundamentals" in text
        assert "## Dynamic Routing" in text

    async def test_search_no_results(self, app_state: AppState) -> None:
        text = await docs.search_docs("tailwind", SearchDocsInput(query="grid-flow"), app_state)
        assert text.startswith('No results found for "grid-flow"')
        assert "get_tailwind_full_docs" in text

    async def test_content_summary(self, app_state: AppState, content_dir: Path) -> None:
        assert await docs.get_content_summary(app_state) == '{"components": 4}'

    async def test_content_summary_missing(self, app_state: AppState, content_dir: Path) -> None:
        (content_dir / "content-summary.json").unlink()
        assert "Content summary not available" in await docs.get_content_summary(app_state)


class TestSearchInput:
    @pytest.mark.parametrize("query", ["a", "x" * 101, "bad\x00query", "tab\there", "del\x7f"])
    def test_rejects_bad_query(self, query: str) -> None:
        with pytest.raises(ValidationError):
            SearchDocsInput(query=query)

    @pytest.mark.parametrize("limit", [0, 21, -1])
    def test_rejects_bad_limit(self, limit: int) -> None:
        with pytest.raises(ValidationError):
            SearchDocsInput(query="routing", limit=limit)

    def test_default_limit(self) -> None:
        assert SearchDocsInput(query="ok").limit == 5


# ---------------------------------------------------------------------------
# Components, patterns, libraries
# ---------------------------------------------------------------------------


class TestComponents:
    async def test_get_component(self, app_state: AppState) -> None:
        text = await components.get_component(GetComponentInput(component_name="button"), app_state)
        assert text.startswith("# Catalyst UI Component: button\n\n```typescript\n")
        assert "export function Button()" in text

    async def test_unknown_component(self, app_state: AppState) -> None:
        with pytest.raises(UIContextError) as exc_info:
            await components.get_component(GetComponentInput(component_name="nope"), app_state)
        assert exc_info.value.code is ErrorCode.NOT_FOUND
        assert "'nope'" in exc_info.value.message
        assert "list_catalyst_components" in exc_info.value.suggestion

    @pytest.mark.parametrize("name", ["../../etc/passwd", "button/../button", "a" * 51, ""])
    async def test_invalid_component_name(self, app_state: AppState, name: str) -> None:
        with pytest.raises(UIContextError) as exc_info:
            await components.get_component(GetComponentInput(component_name=name), app_state)
        assert exc_info.value.code is ErrorCode.INVALID_INPUT
        assert len(app_state.cache) == 0

    async def test_oversized_component(self, app_state: AppState, content_dir: Path) -> None:
        (content_dir / "components" / "catalyst" / "huge.tsx").write_bytes(b"x" * 2048)
        with pytest.raises(UIContextError) as exc_info:
            await components.get_component(GetComponentInput(component_name="huge"), app_state)
        assert exc_info.value.code is ErrorCode.CONTENT_TOO_LARGE

    def test_list_components(self, app_state: AppState) -> None:
        text = components.list_components(app_state)
        assert text.startswith("# Catalyst UI Components (4 total)")
        assert "## Forms\n- button" in text
        assert "## Feedback\n- dialog" in text
        assert "## Data-display\n- table" in text
        assert "## Other\n- sparkline" in text
        assert "README" not in text


class TestPatterns:
    async def test_get_pattern(self, app_state: AppState) -> None:
        params = GetPatternInput(category="layouts", pattern_name="app-header")
        assert await patterns.get_pattern(params, app_state) == "# app-header\n"

    async def test_pattern_in_wrong_category(self, app_state: AppState) -> None:
        params = GetPatternInput(category="pages", pattern_name="app-header")
        with pytest.raises(UIContextError) as exc_info:
            await patterns.get_pattern(params, app_state)
        assert exc_info.value.code is ErrorCode.NOT_FOUND
        assert "list_patterns" in exc_info.value.suggestion

    def test_unknown_category_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GetPatternInput(category="../secrets", pattern_name="x")  # type: ignore[arg-type]

    def test_list_patterns_skips_missing_categories(self, app_state: AppState) -> None:
        text = patterns.list_patterns(app_state)
        assert "## Layouts\n- app-header" in text
        assert "## Pages\n- pricing-page" in text
        assert "## Features" not in text


class TestLibraries:
    async def test_get_library_docs(self, app_state: AppState) -> None:
        params = GetLibraryDocsInput(library_name="framer-motion")
        assert await libraries.get_library_docs(params, app_state) == "# Framer Motion\n"

    async def test_unknown_library(self, app_state: AppState) -> None:
        with pytest.raises(UIContextError) as exc_info:
            await libraries.get_library_docs(GetLibraryDocsInput(library_name="zod"), app_state)
        assert exc_info.value.code is ErrorCode.NOT_FOUND
        assert "list_library_docs" in exc_info.value.suggestion

    def test_list_library_docs(self, app_state: AppState) -> None:
        text = libraries.list_library_docs(app_state)
        assert "(1 available)" in text
        assert "- framer-motion" in text


# ---------------------------------------------------------------------------
# Starter kits
# ---------------------------------------------------------------------------


class TestStarterKits:
    def test_get_starter_kit(self, app_state: AppState) -> None:
        text = starter_kits.get_starter_kit(GetStarterKitInput(kit_id="salient"), app_state)
        assert text.startswith("# Salient")
        assert "- pricing" in text
        assert '"routing": "app router"' in text

    def test_unknown_starter_kit(self, app_state: AppState) -> None:
        with pytest.raises(UIContextError) as exc_info:
            starter_kits.get_starter_kit(GetStarterKitInput(kit_id="nope"), app_state)
        assert exc_info.value.code is ErrorCode.NOT_FOUND

    def test_invalid_starter_kit_id(self, app_state: AppState) -> None:
        with pytest.raises(UIContextError) as exc_info:
            starter_kits.get_starter_kit(GetStarterKitInput(kit_id="../x"), app_state)
        assert exc_info.value.code is ErrorCode.INVALID_INPUT

    def test_list_starter_kits(self, app_state: AppState) -> None:
        text = starter_kits.list_starter_kits(app_state)
        assert "(4 available)" in text
        assert "**Catalyst Dashboard** (`catalyst-dashboard`) [advanced]" in text

    def test_recommend_template(self, app_state: AppState) -> None:
        params = RecommendTemplateInput(
            purpose="dashboard",
            color_preference="professional",
            features=["auth", "darkmode"],
            complexity="advanced",
        )
        text = starter_kits.recommend_template(params, app_state)
        assert "## 1. Catalyst Dashboard (`catalyst-dashboard`): 100% match" in text
        assert "## 2. Studio" in text
        assert "Salient" not in text

    def test_recommend_without_criteria(self, app_state: AppState) -> None:
        text = starter_kits.recommend_template(RecommendTemplateInput(), app_state)
        assert "No templates matched" in text

    def test_questionnaire(self, app_state: AppState) -> None:
        params = QuestionnaireInput(
            answers={"purpose": "marketing", "animations": "subtle", "features": ["pricing"]}
        )
        text = starter_kits.template_questionnaire(params, app_state)
        assert "## 1. Salient (`salient`): 100% match" in text

    def test_questionnaire_rejects_non_string_answers(self) -> None:
        with pytest.raises(ValidationError):
            QuestionnaireInput(answers={"purpose": 3})
