# tests/test_storage.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from models import Priority
from storage import Storage

from .fakes import make_task


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    assert Storage(tmp_path / "nope.json").load_tasks() == []


def test_save_then_load_keeps_order_and_fields(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "tasklist.json"
    tasks = [
        make_task(name="first\nsecond line", priority=Priority.CRITICAL, deadline="2024-02-29 23:59"),
        make_task(name="Ünïcode", priority=Priority.LOW, deadline="2025-01-01 00:00"),
    ]
    storage = Storage(path)
    storage.save_tasks(tasks)

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw[0] == {"name": "first\nsecond line", "priority": "C", "deadlineDateTime": "2024-02-29 23:59"}
    assert list(raw[1]) == ["name", "priority", "deadlineDateTime"]
    assert storage.load_tasks() == tasks


def test_save_replaces_previous_contents(tmp_path: Path) -> None:
    storage = Storage(tmp_path / "tasklist.json")
    storage.save_tasks([make_task(name="a"), make_task(name="b")])
    storage.save_tasks([])
    assert storage.load_tasks() == []


@pytest.mark.parametrize(
    ("content", "error"),
    [
        ("{not json", ValueError),
        ('{"name": "x"}', ValueError),
        ('[{"name": "x", "priority": "Q", "deadlineDateTime": "2024-01-01 10:00"}]', ValueError),
        ('[{"name": "x", "priority": "C"}]', KeyError),
        ('["just a string"]', TypeError),
    ],
)
def test_malformed_file_raises(tmp_path: Path, content: str, error: type) -> None:
    path = tmp_path / "tasklist.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(error):
        Storage(path).load_tasks()
