"""Integration test fixtures.

Provides a fully wired AppState over the on-disk content tree from
tests/conftest.py (content_dir, settings).
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from uicontext.state import AppState, build_state

if TYPE_CHECKING:
    from pathlib import Path

    from uicontext.config import Settings


@pytest.fixture()
def app_state(settings: Settings) -> AppState:
    return build_state(settings)


@pytest.fixture()
def subprocess_env(content_dir: Path) -> dict[str, str]:
    """Environment for running the server as a subprocess against content_dir."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("UICONTEXT__")}
    env["UICONTEXT__CONTENT__BASE_DIR"] = str(content_dir)
    env["UICONTEXT__LOGGING__LEVEL"] = "WARNING"
    return env
