# src/gilu/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import CorruptStorageError, PersistenceError
from .task_models import (
    FIELD_SEPARATOR,
    Deadline,
    Event,
    Task,
    TaskKind,
    Todo,
    format_date_time,
    parse_date_time,
)

logger = logging.getLogger(__name__)

_FIELD_COUNTS = {TaskKind.TODO: 3, TaskKind.DEADLINE: 4, TaskKind.EVENT: 5}


class TaskStore:
    """
    Plain-text task store, one record per line:

        T | 0 | read book
        D | 1 | submit report | 2023-12-15 1800
        E | 0 | conference | 2023-12-10 1400 | 2023-12-12 1600

    Each load/save opens and closes the file. Saves rewrite the whole file
    through a temp file + os.replace.
    """

    def __init__(self, path: str | Path = "./data/gilu.txt") -> None:
        self._path = Path(path)
        self._ensure_file()
        logger.info("TaskStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_file(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if not self._path.exists():
                self._path.touch()
                logger.info("Created empty task file %s", self._path)
        except OSError:
            # load() treats a missing file as empty; save() reports the real failure.
            logger.warning("Could not create task file %s", self._path, exc_info=True)

    # ---- codec ----

    @staticmethod
    def encode_task(task: Task) -> str:
        done = "1" if task.is_done else "0"
        fields = [task.kind.value, done, task.description]
        match task:
            case Deadline(by=by):
                fields.append(format_date_time(by))
            case Event(start=start, end=end):
                fields.extend([format_date_time(start), format_date_time(end)])
        return FIELD_SEPARATOR.join(fields)

    @staticmethod
    def decode_task(line: str) -> Task:
        """Parse one record. Raises ValueError on any malformed input."""
        parts = line.split(FIELD_SEPARATOR)
        if len(parts) < 3:
            raise ValueError(f"expected at least 3 fields, got {len(parts)}")

        kind = TaskKind(parts[0])
        if len(parts) != _FIELD_COUNTS[kind]:
            raise ValueError(f"{kind.name} record needs {_FIELD_COUNTS[kind]} fields, got {len(parts)}")

        done_bit = parts[1]
        if done_bit not in ("0", "1"):
            raise ValueError(f"bad done flag {done_bit!r}")
        is_done = done_bit == "1"
        description = parts[2]

        if kind is TaskKind.TODO:
            return Todo(description, is_done=is_done)
        if kind is TaskKind.DEADLINE:
            return Deadline(description, parse_date_time(parts[3]), is_done=is_done)
        return Event(
            description,
            parse_date_time(parts[3]),
            parse_date_time(parts[4]),
            is_done=is_done,
        )

    # ---- public API ----

    def load(self) -> list[Task]:
        """Read every record in order. Missing file => empty list."""
        if not self._path.exists():
            logger.info("No task file at %s, starting empty.", self._path)
            return []

        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise CorruptStorageError() from e

        # Universal newlines already turned \r\n and \r into \n; other line-break
        # characters belong to descriptions.
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()

        tasks: list[Task] = []
        for lineno, line in enumerate(lines, start=1):
            try:
                tasks.append(self.decode_task(line))
            except ValueError as e:
                logger.warning("Corrupt record at %s:%d: %s", self._path, lineno, e)
                raise CorruptStorageError() from e

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        lines = [self.encode_task(t) + "\n" for t in tasks]
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text("".join(lines), encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.warning("Failed to save tasks to %s: %s", self._path, e)
            raise PersistenceError(f"Error saving tasks: {e}") from e
        logger.debug("Saved %d tasks to %s", len(lines), self._path)
