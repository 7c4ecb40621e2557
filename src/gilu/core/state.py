# src/gilu/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import Ui
from .task_list import TaskList


@dataclass
class AppState:
    # Settings are kept on the state so connectors can read app_name etc.
    settings: object

    tasks: TaskList
    ui: Ui

    # Shown once when the session starts (e.g. a corrupt task file).
    startup_notice: str | None = None
