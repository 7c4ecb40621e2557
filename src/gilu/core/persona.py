# src/gilu/core/persona.py

from __future__ import annotations

from typing import Final

GREETING: Final[str] = (
    "Heyoo! I'm {name}, your trusted friend!\n"
    "How can I make your day better?"
)

FAREWELL: Final[str] = "Bye for now! But I hope to see you again soon!"

NO_TASKS: Final[str] = "Yay! There are no tasks as of now!"
NO_TASKS_ON_DATE: Final[str] = "No tasks found for this date."
NO_MATCHES: Final[str] = "No matching tasks found."

HELP_HEADER: Final[str] = "Uh-oh! I didn't get that. Here's what I understand:"

INTERNAL_ERROR: Final[str] = "Something went wrong on my side. Please try that again."


def get_greeting(app_name: str) -> str:
    return GREETING.format(name=app_name)


def task_count(count: int) -> str:
    """'1 task' / '3 tasks'."""
    return f"{count} task" if count == 1 else f"{count} tasks"
