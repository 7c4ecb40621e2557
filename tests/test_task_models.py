# tests/test_task_models.py

from __future__ import annotations

from datetime import date, datetime

import pytest

from gilu.tasks.task_models import (
    Deadline,
    Event,
    Todo,
    format_display,
    occurs_on,
    parse_date,
    parse_date_time,
)


def test_render_each_variant() -> None:
    assert str(Todo("read book")) == "[T][ ] read book"
    assert (
        str(Deadline("submit report", datetime(2023, 12, 15, 18, 0)))
        == "[D][ ] submit report (by: Dec 15 2023 18:00)"
    )
    assert (
        str(Event("conference", datetime(2023, 12, 10, 14, 0), datetime(2023, 12, 12, 16, 0)))
        == "[E][ ] conference (from: Dec 10 2023 14:00 to: Dec 12 2023 16:00)"
    )


def test_mark_and_unmark_are_idempotent() -> None:
    task = Todo("read book")
    task.mark_done()
    task.mark_done()
    assert task.is_done
    assert str(task) == "[T][X] read book"

    task.mark_not_done()
    task.mark_not_done()
    assert not task.is_done
    assert task.status_icon == " "


def test_description_is_trimmed_and_required() -> None:
    assert Todo("  padded  ").description == "padded"
    with pytest.raises(ValueError):
        Todo("   ")
    with pytest.raises(ValueError):
        Todo("a | b")


def test_description_cannot_border_on_separator() -> None:
    for text in ("pay rent |", "| lead", "two\nlines"):
        with pytest.raises(ValueError):
            Todo(text)
    assert Todo("a|b").description == "a|b"
    assert Todo("x|").description == "x|"


def test_dates_keep_minute_precision() -> None:
    task = Deadline("x", datetime(2024, 1, 2, 3, 4, 59, 123))
    assert task.by == datetime(2024, 1, 2, 3, 4)


def test_parse_date_time_is_strict() -> None:
    assert parse_date_time("2023-12-15 1800") == datetime(2023, 12, 15, 18, 0)
    for bad in ("15-12-2023 1800", "2023-12-15 18:00", "2023-1-5 0900", "2023-12-15", "2023-13-01 1000", ""):
        with pytest.raises(ValueError):
            parse_date_time(bad)


def test_parse_date_is_strict() -> None:
    assert parse_date("2023-12-11") == date(2023, 12, 11)
    for bad in ("2023-12-1", "2023-02-30", "11-12-2023"):
        with pytest.raises(ValueError):
            parse_date(bad)


def test_display_format_pads_day_and_time() -> None:
    assert format_display(datetime(2024, 3, 5, 7, 9)) == "Mar 05 2024 07:09"


def test_occurs_on_uses_calendar_days() -> None:
    event = Event("trip", datetime(2023, 12, 10, 23, 0), datetime(2023, 12, 12, 1, 0))
    assert occurs_on(event, date(2023, 12, 10))
    assert occurs_on(event, date(2023, 12, 12))
    assert not occurs_on(event, date(2023, 12, 13))

    deadline = Deadline("x", datetime(2023, 12, 15, 18, 0))
    assert occurs_on(deadline, date(2023, 12, 15))
    assert not occurs_on(deadline, date(2023, 12, 14))
    assert not occurs_on(Todo("y"), date(2023, 12, 15))
