"""Color helpers for the task table.

Decisions:
- Colors are a fixed lookup table (not configurable).
- Priority and tag cells carry no text: a single space painted with the
  ANSI background code, then reset.
- Escape codes are always emitted so the table is byte-identical for the
  same input, whether or not stdout is a TTY.
"""
from __future__ import annotations
from typing import Dict

from models import Priority, Tag

RESET = "\033[0m"

PRIORITY_COLOR: Dict[Priority, int] = {
    Priority.CRITICAL: 101,
    Priority.HIGH: 103,
    Priority.NORMAL: 102,
    Priority.LOW: 104,
}

TAG_COLOR: Dict[Tag, int] = {
    Tag.IN_TIME: 102,
    Tag.TODAY: 103,
    Tag.OVERDUE: 101,
}


def _code(color: int) -> str:
    """Generate ANSI escape code for a given SGR color number."""
    return f"\033[{color}m"


def indicator(color: int) -> str:
    """One painted blank cell."""
    return _code(color) + " " + RESET


def priority_indicator(priority: Priority) -> str:
    return indicator(PRIORITY_COLOR[priority])


def tag_indicator(tag: Tag) -> str:
    return indicator(TAG_COLOR[tag])


__all__ = ['RESET', 'PRIORITY_COLOR', 'TAG_COLOR', 'indicator', 'priority_indicator', 'tag_indicator']
