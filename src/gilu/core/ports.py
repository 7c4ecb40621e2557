# src/gilu/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The engine depends on Protocols instead of concrete implementations, so the
storage codec and the presentation surface can be swapped (and faked in tests).
"""

from typing import Iterable, Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Persistent copy of the task sequence (see tasks.task_store.TaskStore)."""

    def load(self) -> list[Task]: ...

    # Raises core.errors.PersistenceError on I/O failure.
    def save(self, tasks: Iterable[Task]) -> None: ...


class Ui(Protocol):
    """
    Presentation contract.

    Every engine reply goes through one of these; the engine never writes output itself.
    """

    def show_message(self, text: str) -> str: ...
    def print_added_task(self, task: Task, count: int) -> str: ...
