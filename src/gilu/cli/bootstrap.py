# src/gilu/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- opens the task file (creating it and its directory if needed),
- loads the saved tasks, falling back to an empty list on a corrupt file,
- wires store, presentation surface and engine into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.formatters import get_ui
from ..core.errors import CorruptStorageError
from ..core.state import AppState
from ..core.task_list import TaskList
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.storage_path)
    ui = get_ui(getattr(settings, "ui_style", "console"))

    notice: str | None = None
    loaded: list[Task]
    try:
        loaded = store.load()
    except CorruptStorageError as e:
        logger.error("Starting with an empty list: %s (%s)", e.message, store.path)
        notice = f"Error loading tasks: {e.message}"
        loaded = []

    return AppState(
        settings=settings,
        tasks=TaskList(store, ui, loaded),
        ui=ui,
        startup_notice=notice,
    )
