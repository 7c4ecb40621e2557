# src/gilu/core/errors.py

"""
Error kinds raised by the core.

Each kind carries one fixed, user-facing message. The dispatcher turns user-input
errors into normal replies; storage errors are handled by the engine (save) and
the bootstrap (load).
"""

from __future__ import annotations

from typing import ClassVar


class GiluError(Exception):
    default_message: ClassVar[str] = "An unexpected error occurred in Gilu."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class EmptyDescriptionError(GiluError):
    default_message = "Oops! I need some details for your ToDo."


class InvalidDescriptionError(GiluError):
    default_message = "Sorry, a task description can't contain ' | ' or start or end with '|'. Try rewording it."


class MalformedDeadlineError(GiluError):
    default_message = (
        "Your deadline is missing something. Try: deadline <task> /by <yyyy-MM-dd HHmm>."
    )


class MalformedEventError(GiluError):
    default_message = (
        "Your event needs details! Use: event <task> /from <yyyy-MM-dd HHmm> /to <yyyy-MM-dd HHmm>"
    )


class BadDateError(GiluError):
    default_message = "Invalid date format! Use: yyyy-MM-dd HHmm."


class BadIndexError(GiluError):
    default_message = "Hmm, I can't find that task. Are you sure it's on the list?"


class MissingKeywordError(GiluError):
    default_message = "Oops! Please specify a keyword to search."


class CorruptStorageError(GiluError):
    default_message = "The file format is corrupted. Please fix or delete the file."


class PersistenceError(GiluError):
    default_message = "Error saving tasks."
