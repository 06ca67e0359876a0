"""Line-oriented substring search over large documentation dumps."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

CONTEXT_LINES = 3


def search_content(content: str, query: str, limit: int) -> Iterator[str]:
    """Yield up to ``limit`` excerpts around lines containing ``query``.

    Matching is case-insensitive. Each excerpt holds the matching line plus
    ``CONTEXT_LINES`` lines either side, and scanning resumes after the
    excerpt so consecutive matches do not produce overlapping results.
    """
    if limit < 1:
        return
    lines = content.split("\n")
    needle = query.lower()
    emitted = 0
    i = 0
    while i < len(lines):
        if needle in lines[i].lower():
            start = max(0, i - CONTEXT_LINES)
            end = min(len(lines), i + CONTEXT_LINES + 1)
            yield "\n".join(lines[start:end])
            emitted += 1
            if emitted >= limit:
                return
            i = end
        else:
            i += 1


def format_search_results(excerpts: list[str], query: str, full_docs_tool: str) -> str:
    if not excerpts:
        return (
            f'No results found for "{query}". Try different keywords or use '
            f"{full_docs_tool} for complete documentation."
        )
    blocks = [f"```\n{excerpt}\n```" for excerpt in excerpts]
    return f'Found {len(excerpts)} result(s) for "{query}":\n\n' + "\n\n---\n\n".join(blocks)
