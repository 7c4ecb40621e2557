# src/gilu/connectors/formatters.py

"""
Presentation surfaces for engine replies (core.ports.Ui implementations).

- PlainUi: neutral pass-through, for chat-bubble style surfaces.
- ConsoleUi: frames each message between divider lines for the terminal.
"""

from __future__ import annotations

from ..core import persona
from ..tasks.task_models import Task

DIVIDER = "~" * 59


class PlainUi:
    def show_message(self, text: str) -> str:
        return text.rstrip("\n") + "\n"

    def print_added_task(self, task: Task, count: int) -> str:
        return self.show_message(
            "Got it. I've added this task:\n"
            f"   {task}\n"
            f"Now you have {persona.task_count(count)} in the list."
        )


class ConsoleUi(PlainUi):
    def __init__(self, indent: str = " ") -> None:
        self._indent = indent

    def show_message(self, text: str) -> str:
        body = "\n".join(f"{self._indent}{line}" if line else line for line in text.rstrip("\n").split("\n"))
        return f"{DIVIDER}\n{body}\n{DIVIDER}\n"


def get_ui(style: str) -> PlainUi:
    """Pick a surface by name (`console` or `plain`); unknown names fall back to console."""
    if str(style).strip().lower() == "plain":
        return PlainUi()
    return ConsoleUi()
