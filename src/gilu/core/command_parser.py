# src/gilu/core/command_parser.py

from __future__ import annotations

import re
from enum import Enum

_LIST_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


class Command(Enum):
    LIST = "list"
    SORT = "sort"
    LIST_DATE = "list_date"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    FIND = "find"
    EXIT = "exit"
    UNKNOWN = "unknown"


_KEYWORDS: dict[str, Command] = {
    "list": Command.LIST,
    "sort": Command.SORT,
    "mark": Command.MARK,
    "unmark": Command.UNMARK,
    "delete": Command.DELETE,
    "todo": Command.TODO,
    "deadline": Command.DEADLINE,
    "event": Command.EVENT,
    "find": Command.FIND,
    "bye": Command.EXIT,
    "exit": Command.EXIT,
}


def classify(line: str) -> Command:
    """
    Map a raw input line to a Command. Pure: no state, no I/O.

    The first token is matched case-insensitively. `list YYYY-MM-DD` (exactly two
    tokens) is LIST_DATE; any other `list ...` is LIST.
    """
    tokens = line.split()
    if not tokens:
        return Command.UNKNOWN

    command = _KEYWORDS.get(tokens[0].lower(), Command.UNKNOWN)
    if command is Command.LIST and len(tokens) == 2 and _LIST_DATE_RE.fullmatch(tokens[1]):
        return Command.LIST_DATE
    return command


def split_command(line: str) -> tuple[str, str]:
    """Split off the command token: ('deadline', 'x /by 2023-12-15 1800')."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()
