# tests/test_models.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from models import Priority, Tag, Task, classify, format_deadline, parse_deadline

from .fakes import make_task


@pytest.mark.parametrize(
    ("deadline", "expected"),
    [
        ("2024-03-02 00:00", Tag.IN_TIME),
        ("2024-03-01 00:00", Tag.TODAY),
        ("2024-03-01 23:59", Tag.TODAY),
        ("2024-02-29 23:59", Tag.OVERDUE),
    ],
)
def test_classify_uses_date_only(now, deadline: str, expected: Tag) -> None:
    assert classify(make_task(deadline=deadline), now) is expected


def test_classify_earlier_date_is_never_in_time() -> None:
    task = make_task(deadline="2023-12-31 10:00")
    for days in range(0, 400, 37):
        now = datetime(2023, 12, 31, 8, 0, tzinfo=timezone.utc) + timedelta(days=days)
        assert classify(task, now) is not Tag.IN_TIME


def test_classify_compares_against_utc_date() -> None:
    # 23:30 at UTC-2 is already the next day in UTC
    now = datetime(2024, 3, 1, 23, 30, tzinfo=timezone(timedelta(hours=-2)))
    assert classify(make_task(deadline="2024-03-01 10:00"), now) is Tag.OVERDUE
    assert classify(make_task(deadline="2024-03-02 10:00"), now) is Tag.TODAY


def test_classify_follows_a_changing_now(now) -> None:
    task = make_task(deadline="2024-03-02 10:00")
    assert classify(task, now) is Tag.IN_TIME
    assert classify(task, now + timedelta(days=1)) is Tag.TODAY
    assert classify(task, now + timedelta(days=2)) is Tag.OVERDUE
    assert task.days_until_deadline(now) == 1


def test_priority_codes_are_case_insensitive() -> None:
    assert Priority.from_code("c") is Priority.CRITICAL
    assert Priority.from_code("L") is Priority.LOW
    assert Priority.from_code("x") is None
    assert Priority.from_code("") is None
    assert Priority.HIGH.label == "High"
    assert Tag.IN_TIME.label == "In time"


def test_deadline_format_and_parse() -> None:
    dt = datetime(2024, 2, 29, 9, 5)
    assert format_deadline(dt) == "2024-02-29 09:05"
    assert parse_deadline("2024-02-29 09:05") == dt
    for bad in ("2024-02-29T09:05", "2024-02-30 09:05", "2024-2-29 09:05", "2024-02-29"):
        with pytest.raises(ValueError):
            parse_deadline(bad)


def test_record_keys_and_order() -> None:
    task = make_task(name="a\nb", priority=Priority.HIGH, deadline="2024-01-02 03:04")
    raw = task.to_dict()
    assert list(raw) == ["name", "priority", "deadlineDateTime"]
    assert raw == {"name": "a\nb", "priority": "H", "deadlineDateTime": "2024-01-02 03:04"}
    assert Task.from_dict(raw) == task


def test_record_rejects_bad_values() -> None:
    with pytest.raises(ValueError):
        Task.from_dict({"name": "x", "priority": "Z", "deadlineDateTime": "2024-01-02 03:04"})
    with pytest.raises(ValueError):
        Task.from_dict({"name": "x", "priority": "C", "deadlineDateTime": "tomorrow"})
    with pytest.raises(KeyError):
        Task.from_dict({"name": "x", "priority": "C"})
