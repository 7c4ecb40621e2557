# src/gilu/core/task_list.py

"""
Task-list engine.

Owns the ordered task sequence and implements every user operation on it.
Operations take the full raw input line, validate it completely before touching
the sequence, then persist the whole sequence after a mutation.

Key invariants:
- a rejected input leaves both the sequence and the stored file unchanged,
- positions are insertion order, compacted only by delete,
- a failed save does not roll back the in-memory change (the reply says so).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from ..tasks.task_models import (
    Deadline,
    Event,
    Task,
    Todo,
    check_description,
    format_display_date,
    occurs_on,
    parse_date,
    parse_date_time,
)
from . import persona
from .command_parser import split_command
from .errors import (
    BadDateError,
    BadIndexError,
    EmptyDescriptionError,
    InvalidDescriptionError,
    MalformedDeadlineError,
    MalformedEventError,
    MissingKeywordError,
    PersistenceError,
)
from .ports import TaskRepo, Ui

logger = logging.getLogger(__name__)

_INDEX_RE = re.compile(r"[0-9]+")


def _numbered(tasks: Iterable[Task], indent: str = "  ") -> list[str]:
    return [f"{indent}{i}. {task}" for i, task in enumerate(tasks, start=1)]


class TaskList:
    def __init__(self, store: TaskRepo, ui: Ui, tasks: Iterable[Task] | None = None) -> None:
        self._store = store
        self._ui = ui
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> Sequence[Task]:
        """Read-only snapshot of the current sequence."""
        return tuple(self._tasks)

    # ---- helpers ----

    def _persist(self) -> str | None:
        """Save the sequence. Returns a warning for the reply if the save failed."""
        try:
            self._store.save(self._tasks)
        except PersistenceError as e:
            logger.warning("Keeping in-memory change after failed save: %s", e.message)
            return e.message
        return None

    def _reply(self, text: str, warning: str | None) -> str:
        if warning:
            text = f"{text}\n{warning}"
        return self._ui.show_message(text)

    def _parse_index(self, line: str) -> int:
        """Return the 0-based position named by `<command> <n>`."""
        tokens = line.split()
        if len(tokens) != 2 or not _INDEX_RE.fullmatch(tokens[1]):
            raise BadIndexError()
        number = int(tokens[1])
        if not 1 <= number <= len(self._tasks):
            raise BadIndexError()
        return number - 1

    @staticmethod
    def _check_description(text: str, empty_error: type[Exception]) -> str:
        text = text.strip()
        if not text:
            raise empty_error()
        try:
            return check_description(text)
        except ValueError as e:
            raise InvalidDescriptionError() from e

    def _add(self, task: Task) -> str:
        self._tasks.append(task)
        logger.debug("Task added kind=%s count=%d", task.kind.name, len(self._tasks))
        warning = self._persist()
        reply = self._ui.print_added_task(task, len(self._tasks))
        if warning:
            reply += self._ui.show_message(warning)
        return reply

    # ---- queries ----

    def list_tasks(self) -> str:
        if not self._tasks:
            return self._ui.show_message(persona.NO_TASKS)
        lines = ["Here are the tasks in your list:", *_numbered(self._tasks)]
        return self._ui.show_message("\n".join(lines))

    def sort_tasks(self) -> str:
        """Events by start, then deadlines by due time, then todos as entered."""
        if not self._tasks:
            return self._ui.show_message(persona.NO_TASKS)

        events = sorted((t for t in self._tasks if isinstance(t, Event)), key=lambda t: t.start)
        deadlines = sorted((t for t in self._tasks if isinstance(t, Deadline)), key=lambda t: t.by)
        todos = [t for t in self._tasks if isinstance(t, Todo)]

        lines = ["Here is your sorted task list:"]
        for title, group in (("Events", events), ("Deadlines", deadlines), ("Todos", todos)):
            if group:
                lines.append("")
                lines.append(f"{title}:")
                lines.extend(_numbered(group))
        return self._ui.show_message("\n".join(lines))

    def list_on_date(self, line: str) -> str:
        _, rest = split_command(line)
        try:
            day = parse_date(rest)
        except ValueError as e:
            raise BadDateError("Invalid date format. Use yyyy-MM-dd.") from e

        matches = [t for t in self._tasks if occurs_on(t, day)]
        if not matches:
            return self._ui.show_message(persona.NO_TASKS_ON_DATE)
        lines = [f"Here are the tasks on {format_display_date(day)}:", *_numbered(matches)]
        return self._ui.show_message("\n".join(lines))

    def find(self, line: str) -> str:
        _, keyword = split_command(line)
        if not keyword:
            raise MissingKeywordError()

        needle = keyword.casefold()
        matches = [t for t in self._tasks if needle in t.description.casefold()]
        if not matches:
            return self._ui.show_message(persona.NO_MATCHES)
        lines = ["Here are the matching tasks:", *_numbered(matches)]
        return self._ui.show_message("\n".join(lines))

    # ---- mutations ----

    def add_todo(self, line: str) -> str:
        _, rest = split_command(line)
        description = self._check_description(rest, EmptyDescriptionError)
        return self._add(Todo(description))

    def add_deadline(self, line: str) -> str:
        _, rest = split_command(line)
        if not rest:
            raise EmptyDescriptionError("Oops! I need some details for your deadline.")

        parts = rest.split(" /by ", 1)
        if len(parts) < 2 or not parts[0].strip() or not parts[1].strip():
            raise MalformedDeadlineError()
        description = self._check_description(parts[0], MalformedDeadlineError)

        try:
            by = parse_date_time(parts[1])
        except ValueError as e:
            raise BadDateError() from e
        return self._add(Deadline(description, by))

    def add_event(self, line: str) -> str:
        _, rest = split_command(line)

        parts = rest.split(" /from ", 1)
        if len(parts) < 2 or not parts[0].strip():
            raise MalformedEventError()
        times = parts[1].split(" /to ", 1)
        if len(times) < 2 or not times[0].strip() or not times[1].strip():
            raise MalformedEventError("Your event needs both a start and end time.")
        description = self._check_description(parts[0], MalformedEventError)

        try:
            start = parse_date_time(times[0])
            end = parse_date_time(times[1])
        except ValueError as e:
            raise BadDateError() from e
        return self._add(Event(description, start, end))

    def mark(self, line: str) -> str:
        idx = self._parse_index(line)
        task = self._tasks[idx]
        task.mark_done()
        warning = self._persist()
        return self._reply(f"Cool! I've marked this task as done:\n   {task}", warning)

    def unmark(self, line: str) -> str:
        idx = self._parse_index(line)
        task = self._tasks[idx]
        task.mark_not_done()
        warning = self._persist()
        return self._reply(f"No problem! I've marked this task as not done:\n   {task}", warning)

    def delete(self, line: str) -> str:
        idx = self._parse_index(line)
        removed = self._tasks.pop(idx)
        logger.debug("Task removed position=%d count=%d", idx + 1, len(self._tasks))
        warning = self._persist()
        text = (
            f"Noted. I've removed this task:\n   {removed}\n"
            f"Now you have {persona.task_count(len(self._tasks))} in the list."
        )
        return self._reply(text, warning)
