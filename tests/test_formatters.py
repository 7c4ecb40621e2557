# tests/test_formatters.py

from __future__ import annotations

from gilu.connectors.formatters import DIVIDER, ConsoleUi, PlainUi, get_ui
from gilu.tasks.task_models import Todo


def test_plain_added_task_singular_and_plural() -> None:
    ui = PlainUi()

    assert ui.print_added_task(Todo("x"), 1) == (
        "Got it. I've added this task:\n   [T][ ] x\nNow you have 1 task in the list.\n"
    )
    assert "Now you have 4 tasks in the list." in ui.print_added_task(Todo("x"), 4)


def test_console_frames_messages() -> None:
    text = ConsoleUi().show_message("hello\nworld")

    lines = text.splitlines()
    assert lines[0] == DIVIDER
    assert lines[1:3] == [" hello", " world"]
    assert lines[-1] == DIVIDER


def test_get_ui() -> None:
    assert type(get_ui("plain")) is PlainUi
    assert isinstance(get_ui("console"), ConsoleUi)
