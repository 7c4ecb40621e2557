# tests/fakes.py

from __future__ import annotations

import copy
from collections.abc import Iterable

from gilu.core.errors import PersistenceError
from gilu.tasks.task_models import Task


class FakeTaskStore:
    """
    In-memory TaskRepo for engine tests.

    - Captures a deep copy of every save for assertions
    - Can be switched to fail saves like a full or read-only disk
    """

    def __init__(self, tasks: Iterable[Task] = (), *, fail_saves: bool = False) -> None:
        self.saved: list[Task] = list(tasks)
        self.fail_saves = fail_saves
        self.save_calls = 0

    def load(self) -> list[Task]:
        return copy.deepcopy(self.saved)

    def save(self, tasks: Iterable[Task]) -> None:
        self.save_calls += 1
        if self.fail_saves:
            raise PersistenceError("Error saving tasks: disk full")
        self.saved = copy.deepcopy(list(tasks))
