"""Data models for the terminal task list.

Exposes the Task dataclass plus the two closed enumerations shown in the
table: Priority (chosen by the user) and Tag (derived from the deadline).
The tag is never stored on a task; it is recomputed from "now" on every
render so it cannot go stale.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional

DEADLINE_FORMAT_HINT = "YYYY-MM-DD HH:MM"


class Priority(str, Enum):
    CRITICAL = "C"
    HIGH = "H"
    NORMAL = "N"
    LOW = "L"

    @property
    def label(self) -> str:
        return PRIORITY_LABELS[self]

    @classmethod
    def from_code(cls, code: str) -> Optional["Priority"]:
        """Case-insensitive lookup by single-letter code; None if unknown."""
        for member in cls:
            if member.value == code.upper():
                return member
        return None


class Tag(str, Enum):
    IN_TIME = "I"
    TODAY = "T"
    OVERDUE = "O"

    @property
    def label(self) -> str:
        return TAG_LABELS[self]


PRIORITY_LABELS: Dict[Priority, str] = {
    Priority.CRITICAL: "Critical",
    Priority.HIGH: "High",
    Priority.NORMAL: "Normal",
    Priority.LOW: "Low",
}
TAG_LABELS: Dict[Tag, str] = {
    Tag.IN_TIME: "In time",
    Tag.TODAY: "Today",
    Tag.OVERDUE: "Overdue",
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_deadline(dt: datetime) -> str:
    """Canonical deadline text, e.g. '2024-02-29 09:05' (no seconds)."""
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} {dt.hour:02d}:{dt.minute:02d}"


def parse_deadline(text: str) -> datetime:
    """Inverse of format_deadline. Raises ValueError on malformed text."""
    date_part, sep, time_part = text.partition(" ")
    if not sep or len(date_part) != 10 or len(time_part) != 5:
        raise ValueError(f"deadline must look like {DEADLINE_FORMAT_HINT}: {text!r}")
    return datetime.fromisoformat(f"{date_part}T{time_part}")


@dataclass
class Task:
    """A single task.

    Fields:
        name: Possibly multi-line text. Blank only if it was edited to blank.
        priority: One of the four Priority values.
        deadline: Canonical "YYYY-MM-DD HH:MM" text; always parseable.
    """
    name: str
    priority: Priority
    deadline: str

    def deadline_datetime(self) -> datetime:
        return parse_deadline(self.deadline)

    def days_until_deadline(self, now: datetime) -> int:
        """Whole calendar days from now's date (UTC+0) to the deadline date."""
        today: date = now.astimezone(timezone.utc).date() if now.tzinfo else now.date()
        return (self.deadline_datetime().date() - today).days

    # -------------------- serialization --------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'priority': self.priority.value,
            'deadlineDateTime': self.deadline,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Task":
        """Build a Task from a stored record.

        Raises KeyError for a missing key and ValueError for an unknown
        priority code or a deadline that does not parse.
        """
        priority = Priority(raw['priority'])
        deadline = str(raw['deadlineDateTime'])
        parse_deadline(deadline)
        return cls(name=str(raw['name']), priority=priority, deadline=deadline)


def classify(task: Task, now: datetime) -> Tag:
    """Urgency tag of a task relative to now; time of day is ignored."""
    days = task.days_until_deadline(now)
    if days > 0:
        return Tag.IN_TIME
    if days == 0:
        return Tag.TODAY
    return Tag.OVERDUE
