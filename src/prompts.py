"""Validated line-input loops shared by task creation and editing.

Every loop follows the same read/validate/retry cycle: print the prompt,
read one trimmed line, hand it to a parser that returns None on rejection,
and prompt again until a value comes back. Nothing here raises for bad
input; EOFError from the underlying reader propagates to the caller.
"""
from __future__ import annotations
from datetime import date, datetime, time
import logging
from typing import Callable, List, Optional

from models import Priority

logger = logging.getLogger(__name__)

PRIORITY_PROMPT = "Input the task priority (C, H, N, L):"
DATE_PROMPT = "Input the date (yyyy-mm-dd):"
TIME_PROMPT = "Input the time (hh:mm):"
NAME_PROMPT = "Input a new task (enter a blank line to end):"
INVALID_DATE = "The input date is invalid"
INVALID_TIME = "The input time is invalid"
INVALID_TASK_NUMBER = "Invalid task number"


# -------------------- parsers --------------------
def _numbers(token: str, sep: str, count: int) -> Optional[List[int]]:
    parts = token.split(sep)
    if len(parts) != count or not all(p.isdecimal() for p in parts):
        return None
    return [int(p) for p in parts]


def parse_priority(token: str) -> Optional[Priority]:
    return Priority.from_code(token)


def parse_date(token: str) -> Optional[date]:
    """'year-month-day' -> date; None on bad shape or impossible calendar date."""
    numbers = _numbers(token, "-", 3)
    if numbers is None:
        return None
    try:
        return date(*numbers)
    except (ValueError, OverflowError):
        return None


def parse_time(day: date, token: str) -> Optional[datetime]:
    """'hour:minute' anchored to `day`; None on bad shape or out-of-range value."""
    numbers = _numbers(token, ":", 2)
    if numbers is None:
        return None
    try:
        return datetime.combine(day, time(*numbers))
    except (ValueError, OverflowError):
        return None


def parse_index(token: str, size: int) -> Optional[int]:
    """1-based task number in 1..size -> zero-based index."""
    if not token.isdecimal():
        return None
    number = int(token)
    if not 1 <= number <= size:
        return None
    return number - 1


# -------------------- interactive loops --------------------
class Prompter:
    """Prompt/response I/O over two callables (defaults: input and print)."""

    def __init__(self, read: Callable[[], str] = input, write: Callable[[str], None] = print):
        self.read = read
        self.write = write

    def ask(self, message: str) -> str:
        self.write(message)
        return self.read().strip()

    def ask_priority(self) -> Priority:
        # Unknown codes are ignored without a message.
        while True:
            token = self.ask(PRIORITY_PROMPT)
            priority = parse_priority(token)
            if priority is not None:
                return priority
            logger.debug("Rejected priority token %r", token)

    def ask_date(self) -> date:
        while True:
            token = self.ask(DATE_PROMPT)
            day = parse_date(token)
            if day is not None:
                return day
            logger.debug("Rejected date token %r", token)
            self.write(INVALID_DATE)

    def ask_time(self, day: date) -> datetime:
        while True:
            token = self.ask(TIME_PROMPT)
            moment = parse_time(day, token)
            if moment is not None:
                return moment
            logger.debug("Rejected time token %r", token)
            self.write(INVALID_TIME)

    def ask_name(self) -> str:
        """Collect trimmed lines until a blank one; may return ''."""
        self.write(NAME_PROMPT)
        lines: List[str] = []
        while True:
            line = self.read().strip()
            if not line:
                break
            lines.append(line)
        return "\n".join(lines).rstrip()

    def ask_index(self, size: int) -> int:
        while True:
            token = self.ask(f"Input the task number (1-{size}):")
            index = parse_index(token, size)
            if index is not None:
                return index
            logger.debug("Rejected task number %r (size=%d)", token, size)
            self.write(INVALID_TASK_NUMBER)
