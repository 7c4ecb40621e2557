# src/gilu/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import ClassVar

DATE_TIME_FORMAT = "%Y-%m-%d %H%M"
DATE_FORMAT = "%Y-%m-%d"

# strptime accepts single-digit fields; the regexes pin the exact widths.
_DATE_TIME_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{4}")
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

FIELD_SEPARATOR = " | "


class TaskKind(StrEnum):
    """Variant tag; the value doubles as the record prefix on disk."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def parse_date_time(text: str) -> datetime:
    """Strictly parse `yyyy-MM-dd HHmm`. Raises ValueError."""
    raw = text.strip()
    if not _DATE_TIME_RE.fullmatch(raw):
        raise ValueError(f"not a yyyy-MM-dd HHmm date-time: {text!r}")
    return datetime.strptime(raw, DATE_TIME_FORMAT)


def parse_date(text: str) -> date:
    """Strictly parse `yyyy-MM-dd`. Raises ValueError."""
    raw = text.strip()
    if not _DATE_RE.fullmatch(raw):
        raise ValueError(f"not a yyyy-MM-dd date: {text!r}")
    return datetime.strptime(raw, DATE_FORMAT).date()


def format_date_time(value: datetime) -> str:
    return value.strftime(DATE_TIME_FORMAT)


def format_display(value: datetime) -> str:
    """`MMM dd yyyy HH:mm` with English month names (independent of locale)."""
    return f"{_MONTHS[value.month - 1]} {value.day:02d} {value.year:04d} {value.hour:02d}:{value.minute:02d}"


def format_display_date(value: date) -> str:
    return f"{_MONTHS[value.month - 1]} {value.day:02d} {value.year:04d}"


def _to_minute(value: datetime) -> datetime:
    return value.replace(second=0, microsecond=0)


def check_description(text: str) -> str:
    """
    Return the trimmed description, or raise ValueError if it cannot be stored
    as a single record field.
    """
    text = (text or "").strip()
    if not text:
        raise ValueError("description is required")
    # Padding catches a "|" at either edge, which merges with the neighbouring separator.
    if FIELD_SEPARATOR in f" {text} ":
        raise ValueError(f"description must not contain or border on {FIELD_SEPARATOR!r}")
    if "\n" in text or "\r" in text:
        raise ValueError("description must be a single line")
    return text


class _DoneFlag:
    """Done-flag behaviour shared by every task variant."""

    __slots__ = ()

    description: str
    is_done: bool

    def mark_done(self) -> None:
        self.is_done = True

    def mark_not_done(self) -> None:
        self.is_done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def _check_description(self) -> None:
        self.description = check_description(self.description)

    def __str__(self) -> str:
        return render_task(self)  # type: ignore[arg-type]


@dataclass(slots=True, eq=True)
class Todo(_DoneFlag):
    kind: ClassVar[TaskKind] = TaskKind.TODO

    description: str
    is_done: bool = False

    def __post_init__(self) -> None:
        self._check_description()


@dataclass(slots=True, eq=True)
class Deadline(_DoneFlag):
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    description: str
    by: datetime
    is_done: bool = False

    def __post_init__(self) -> None:
        self._check_description()
        self.by = _to_minute(self.by)


@dataclass(slots=True, eq=True)
class Event(_DoneFlag):
    """
    A time-ranged task.

    `start`/`end` are the user's `/from` and `/to`; start <= end is not checked.
    """

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    description: str
    start: datetime
    end: datetime
    is_done: bool = False

    def __post_init__(self) -> None:
        self._check_description()
        self.start = _to_minute(self.start)
        self.end = _to_minute(self.end)


Task = Todo | Deadline | Event


def render_task(task: Task) -> str:
    head = f"[{task.kind.value}][{task.status_icon}] {task.description}"
    match task:
        case Todo():
            return head
        case Deadline(by=by):
            return f"{head} (by: {format_display(by)})"
        case Event(start=start, end=end):
            return f"{head} (from: {format_display(start)} to: {format_display(end)})"
    raise TypeError(f"Unknown task variant: {task!r}")


def occurs_on(task: Task, day: date) -> bool:
    """True for deadlines due that day and events whose calendar span covers it."""
    match task:
        case Deadline(by=by):
            return by.date() == day
        case Event(start=start, end=end):
            return start.date() <= day <= end.date()
    return False
