"""Unit-specific fixtures (no I/O beyond tmp_path)."""

from __future__ import annotations

import pytest

from uicontext.cache import ContentCache


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def cache(clock: FakeClock) -> ContentCache:
    """Cache with a 300s freshness window driven by the fake clock."""
    return ContentCache(ttl_seconds=300, max_entries=8, clock=clock)
