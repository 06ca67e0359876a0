"""MCP server entry point.

Registers every tool, resource and prompt on a FastMCP instance. Tool
failures are returned as ``isError`` results whose text is the JSON error
envelope from ``UIContextError.to_dict()``.

Run with ``python -m uicontext.server`` or the ``uicontext`` script.
"""

from __future__ import annotations

import inspect
import json
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Annotated, Any

import structlog
from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent, ToolAnnotations
from pydantic import Field, ValidationError

from uicontext.config import Settings
from uicontext.errors import ErrorCode, UIContextError, internal_error
from uicontext.logging_setup import configure_logging
from uicontext.models.tools import (
    GetComponentInput,
    GetLibraryDocsInput,
    GetPatternInput,
    GetStarterKitInput,
    QuestionnaireInput,
    RecommendTemplateInput,
    SearchDocsInput,
)
from uicontext.state import AppState, build_state
from uicontext.tools import components, docs, libraries, patterns, starter_kits

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable

log = structlog.get_logger()

SERVER_NAME = "uicontext"

_READ_ONLY = ToolAnnotations(
    readOnlyHint=True,
    destructiveHint=False,
    idempotentHint=True,
    openWorldHint=False,
)

_INSTRUCTIONS = (
    "Reference content for building Next.js applications with Tailwind CSS: full and "
    "searchable documentation, Catalyst UI component sources, abstracted UI patterns, "
    "library notes and starter-kit recommendations. All tools are read-only."
)


# ---------------------------------------------------------------------------
# Result envelope
# ---------------------------------------------------------------------------


def _validation_message(exc: ValidationError) -> str:
    """Join validator messages without echoing the rejected input values."""
    messages = []
    for err in exc.errors(include_url=False, include_input=False):
        msg = err["msg"].removeprefix("Value error, ")
        loc = ".".join(str(part) for part in err["loc"])
        messages.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(messages)


def _error_result(error: UIContextError) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps(error.to_dict()))],
        isError=True,
    )


async def run_tool(
    state: AppState,
    tool: str,
    call: Callable[[AppState], Awaitable[str] | str],
    **log_fields: Any,
) -> CallToolResult:
    """Run one tool handler and wrap its outcome for the MCP client."""
    log.info("tool_request", tool=tool, **log_fields)
    try:
        result = call(state)
        if inspect.isawaitable(result):
            result = await result
    except ValidationError as exc:
        error = UIContextError(ErrorCode.INVALID_INPUT, _validation_message(exc))
    except UIContextError as exc:
        error = exc
    except Exception:
        log.exception("tool_unexpected_error", tool=tool)
        error = internal_error(tool)
    else:
        log.info("tool_completed", tool=tool, content_size=len(result))
        return CallToolResult(content=[TextContent(type="text", text=result)])

    log.warning("tool_failed", tool=tool, code=error.code.value)
    return _error_result(error)


# ---------------------------------------------------------------------------
# Server construction
# ---------------------------------------------------------------------------


def create_server(state: AppState) -> FastMCP:
    settings = state.settings

    @asynccontextmanager
    async def lifespan(_server: FastMCP) -> AsyncIterator[AppState]:
        log.info(
            "server_started",
            transport=settings.server.transport,
            templates=len(state.catalog.templates),
        )
        try:
            yield state
        finally:
            state.cache.invalidate()
            log.info("server_stopped")

    mcp = FastMCP(
        SERVER_NAME,
        instructions=_INSTRUCTIONS,
        host=settings.server.host,
        port=settings.server.port,
        lifespan=lifespan,
    )

    _register_doc_tools(mcp, state)
    _register_content_tools(mcp, state)
    _register_starter_kit_tools(mcp, state)
    _register_resources(mcp, state)
    _register_prompts(mcp)
    return mcp


Query = Annotated[
    str,
    Field(description="The search query (2-100 characters), e.g. 'routing' or 'dark mode'"),
]
Limit = Annotated[
    int,
    Field(description="Maximum number of results to return (default: 5, max: 20)"),
]


def _register_doc_tools(mcp: FastMCP, state: AppState) -> None:
    @mcp.tool(
        name="get_nextjs_full_docs",
        description=(
            "Get the complete Next.js documentation (~2.5MB, ~320,000 tokens). Only use with "
            "models that support very large context windows; prefer search_nextjs_docs."
        ),
        annotations=_READ_ONLY,
    )
    async def get_nextjs_full_docs() -> CallToolResult:
        return await run_tool(
            state, "get_nextjs_full_docs", lambda s: docs.get_full_docs("nextjs", s)
        )

    @mcp.tool(
        name="get_tailwind_full_docs",
        description=(
            "Get the complete Tailwind CSS documentation (~2.1MB). Only use with models that "
            "support very large context windows; prefer search_tailwind_docs."
        ),
        annotations=_READ_ONLY,
    )
    async def get_tailwind_full_docs() -> CallToolResult:
        return await run_tool(
            state, "get_tailwind_full_docs", lambda s: docs.get_full_docs("tailwind", s)
        )

    @mcp.tool(
        name="search_nextjs_docs",
        description=(
            "Search the Next.js documentation for a keyword or phrase. Returns excerpts with "
            "surrounding context."
        ),
        annotations=_READ_ONLY,
    )
    async def search_nextjs_docs(query: Query, limit: Limit = 5) -> CallToolResult:
        return await run_tool(
            state,
            "search_nextjs_docs",
            lambda s: docs.search_docs("nextjs", SearchDocsInput(query=query, limit=limit), s),
            query=query,
            limit=limit,
        )

    @mcp.tool(
        name="search_tailwind_docs",
        description=(
            "Search the Tailwind CSS documentation for utility classes or concepts. Returns "
            "excerpts with surrounding context."
        ),
        annotations=_READ_ONLY,
    )
    async def search_tailwind_docs(query: Query, limit: Limit = 5) -> CallToolResult:
        return await run_tool(
            state,
            "search_tailwind_docs",
            lambda s: docs.search_docs("tailwind", SearchDocsInput(query=query, limit=limit), s),
            query=query,
            limit=limit,
        )


def _register_content_tools(mcp: FastMCP, state: AppState) -> None:
    @mcp.tool(
        name="get_catalyst_component",
        description=(
            "Retrieve the TypeScript source of a Catalyst UI component, e.g. 'button', "
            "'dialog' or 'table'."
        ),
        annotations=_READ_ONLY,
    )
    async def get_catalyst_component(
        component_name: Annotated[str, Field(description="Name of the Catalyst component")],
    ) -> CallToolResult:
        return await run_tool(
            state,
            "get_catalyst_component",
            lambda s: components.get_component(
                GetComponentInput(component_name=component_name), s
            ),
            component_name=component_name,
        )

    @mcp.tool(
        name="list_catalyst_components",
        description="List the available Catalyst UI components grouped by category.",
        annotations=_READ_ONLY,
    )
    async def list_catalyst_components() -> CallToolResult:
        return await run_tool(state, "list_catalyst_components", components.list_components)

    @mcp.tool(
        name="get_pattern",
        description=(
            "Retrieve an abstracted UI pattern write-up. Categories: layouts, pages, features."
        ),
        annotations=_READ_ONLY,
    )
    async def get_pattern(
        category: Annotated[str, Field(description="One of 'layouts', 'pages', 'features'")],
        pattern_name: Annotated[
            str, Field(description="Pattern name, e.g. 'app-header' or 'pricing-page'")
        ],
    ) -> CallToolResult:
        return await run_tool(
            state,
            "get_pattern",
            lambda s: patterns.get_pattern(
                GetPatternInput(category=category, pattern_name=pattern_name), s
            ),
            category=category,
            pattern_name=pattern_name,
        )

    @mcp.tool(
        name="list_patterns",
        description="List the available abstracted UI patterns grouped by category.",
        annotations=_READ_ONLY,
    )
    async def list_patterns() -> CallToolResult:
        return await run_tool(state, "list_patterns", patterns.list_patterns)

    @mcp.tool(
        name="get_library_docs",
        description="Retrieve usage notes for a third-party library, e.g. 'framer-motion'.",
        annotations=_READ_ONLY,
    )
    async def get_library_docs(
        library_name: Annotated[str, Field(description="Name of the library")],
    ) -> CallToolResult:
        return await run_tool(
            state,
            "get_library_docs",
            lambda s: libraries.get_library_docs(
                GetLibraryDocsInput(library_name=library_name), s
            ),
            library_name=library_name,
        )

    @mcp.tool(
        name="list_library_docs",
        description="List the libraries with available documentation.",
        annotations=_READ_ONLY,
    )
    async def list_library_docs() -> CallToolResult:
        return await run_tool(state, "list_library_docs", libraries.list_library_docs)


def _register_starter_kit_tools(mcp: FastMCP, state: AppState) -> None:
    @mcp.tool(
        name="get_starter_kit",
        description="Retrieve the full record of a starter kit by id.",
        annotations=_READ_ONLY,
    )
    async def get_starter_kit(
        kit_id: Annotated[str, Field(description="Starter kit id from list_starter_kits")],
    ) -> CallToolResult:
        return await run_tool(
            state,
            "get_starter_kit",
            lambda s: starter_kits.get_starter_kit(GetStarterKitInput(kit_id=kit_id), s),
            kit_id=kit_id,
        )

    @mcp.tool(
        name="list_starter_kits",
        description="List every starter kit in the catalog.",
        annotations=_READ_ONLY,
    )
    async def list_starter_kits() -> CallToolResult:
        return await run_tool(state, "list_starter_kits", starter_kits.list_starter_kits)

    @mcp.tool(
        name="recommend_template",
        description=(
            "Recommend the best starter kits for a project. Every preference is optional; "
            "returns the top 3 matches with reasons."
        ),
        annotations=_READ_ONLY,
    )
    async def recommend_template(
        purpose: Annotated[
            str | None, Field(description="Project purpose, e.g. 'dashboard' or 'blog'")
        ] = None,
        color_preference: Annotated[
            str | None, Field(description="Color preference, e.g. 'professional'")
        ] = None,
        animations: Annotated[
            str | None, Field(description="Animation level, e.g. 'subtle' or 'rich'")
        ] = None,
        features: Annotated[
            list[str] | None, Field(description="Desired features, e.g. ['auth', 'darkmode']")
        ] = None,
        complexity: Annotated[
            str | None, Field(description="Complexity, e.g. 'simple' or 'advanced'")
        ] = None,
    ) -> CallToolResult:
        return await run_tool(
            state,
            "recommend_template",
            lambda s: starter_kits.recommend_template(
                RecommendTemplateInput(
                    purpose=purpose,
                    color_preference=color_preference,
                    animations=animations,
                    features=features or (),
                    complexity=complexity,
                ),
                s,
            ),
            purpose=purpose,
            features=features,
        )

    @mcp.tool(
        name="template_questionnaire",
        description=(
            "Recommend starter kits from questionnaire answers. Keys: purpose, "
            "colorPreference, animations, features, complexity."
        ),
        annotations=_READ_ONLY,
    )
    async def template_questionnaire(
        answers: Annotated[
            dict[str, str | list[str]], Field(description="Answers keyed by question")
        ],
    ) -> CallToolResult:
        return await run_tool(
            state,
            "template_questionnaire",
            lambda s: starter_kits.template_questionnaire(QuestionnaireInput(answers=answers), s),
            questions=sorted(answers),
        )


def _register_resources(mcp: FastMCP, state: AppState) -> None:
    async def _full_docs(doc_set: str) -> str:
        try:
            return await docs.get_full_docs(doc_set, state)  # type: ignore[arg-type]
        except UIContextError as exc:
            return json.dumps(exc.to_dict(), indent=2)

    @mcp.resource(
        "docs://nextjs-full",
        name="nextjs-docs",
        description="Full Next.js documentation in LLM-optimized format",
        mime_type="text/plain",
    )
    async def nextjs_docs() -> str:
        return await _full_docs("nextjs")

    @mcp.resource(
        "docs://tailwind-full",
        name="tailwind-docs",
        description="Full Tailwind CSS documentation",
        mime_type="text/plain",
    )
    async def tailwind_docs() -> str:
        return await _full_docs("tailwind")

    @mcp.resource(
        "docs://content-summary",
        name="content-summary",
        description="Summary of available documentation, components, and patterns",
        mime_type="application/json",
    )
    async def content_summary() -> str:
        return await docs.get_content_summary(state)


def _register_prompts(mcp: FastMCP) -> None:
    @mcp.prompt(
        name="search-nextjs-routing",
        description="Search the Next.js documentation for routing and navigation information",
    )
    def search_nextjs_routing() -> str:
        return (
            "Search the Next.js documentation for information about routing and navigation. "
            "Use search_nextjs_docs with query 'routing'."
        )

    @mcp.prompt(
        name="get-catalyst-component",
        description="Retrieve a specific Catalyst UI component source code",
    )
    def get_catalyst_component(component_name: str) -> str:
        return (
            f"Get the Catalyst UI component '{component_name}'. "
            f"Use get_catalyst_component with component_name '{component_name}'."
        )

    @mcp.prompt(
        name="find-pattern",
        description="Browse patterns for layouts, pages, or features",
    )
    def find_pattern(category: str) -> str:
        return (
            f"Show me available patterns in the '{category}' category. Use list_patterns."
        )


def main() -> None:
    settings = Settings()
    configure_logging(settings.logging)
    state = build_state(settings)
    server = create_server(state)
    if settings.server.transport == "http":
        server.run(transport="streamable-http")
    else:
        server.run(transport="stdio")


if __name__ == "__main__":
    main()
