"""Fixed-width table rendering for the task list.

Layout (80 columns):

    +----+------------+-------+---+---+--------------------------------------------+
    | N  |    Date    | Time  | P | D |                   Task                     |
    +----+------------+-------+---+---+--------------------------------------------+

Each task is a block of rows closed by a border. Only the first row of a
block carries the number/date/time/priority/tag cells; wrapped text goes on
continuation rows with blank placeholders.
"""
from datetime import datetime
from typing import Iterable, List, Sequence
import re

from models import Task, classify
from theme import priority_indicator, tag_indicator

TEXT_WIDTH = 44
BORDER = "+----+------------+-------+---+---+--------------------------------------------+"
HEADER = "| N  |    Date    | Time  | P | D |                   Task                     |"
EMPTY_NOTICE = "No tasks have been input"
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def wrap_text(text: str, width: int = TEXT_WIDTH) -> List[str]:
    """Split on explicit line breaks, then hard-wrap each line at `width`.

    An empty line still yields one (empty) row, so author-intended blank
    lines and a blank name both stay visible.
    """
    rows: List[str] = []
    for line in LINE_BREAK_RE.split(text):
        if not line:
            rows.append('')
            continue
        rows.extend(line[i:i + width] for i in range(0, len(line), width))
    return rows


def _first_row(number: int, task: Task, now: datetime, text: str) -> str:
    date_time = task.deadline.replace(" ", " | ", 1)
    priority = priority_indicator(task.priority)
    tag = tag_indicator(classify(task, now))
    return "| %-2d | %s | %s | %s |%-*s|" % (number, date_time, priority, tag, TEXT_WIDTH, text)


def _continuation_row(text: str) -> str:
    return "|    |            |       |   |   |%-*s|" % (TEXT_WIDTH, text)


def render_rows(tasks: Sequence[Task], now: datetime) -> Iterable[str]:
    if not tasks:
        yield EMPTY_NOTICE
        return
    yield BORDER
    yield HEADER
    yield BORDER
    for number, task in enumerate(tasks, start=1):
        first, *rest = wrap_text(task.name)
        yield _first_row(number, task, now, first)
        for line in rest:
            yield _continuation_row(line)
        yield BORDER


def render(tasks: Sequence[Task], now: datetime) -> str:
    """Render the whole collection; a pure function of (tasks, now)."""
    return "\n".join(render_rows(tasks, now))
