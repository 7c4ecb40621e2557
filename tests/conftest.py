# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from gilu.cli.bootstrap import create_initial_state
from gilu.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="Gilu",
        storage_path=tmp_path / "data" / "gilu.txt",
        ui_style="plain",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired the same way the CLI wires it.

    NOTE: the real TaskStore is used here because the file it writes is part of
    what we want to test.
    """
    return create_initial_state(settings=settings)
