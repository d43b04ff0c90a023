"""Field-level editing of a single task.

Recognized fields: "priority", "date", "time", "task". Each sub-editor runs
the same validated input loop used at creation time, so once a field name is
recognized the edit always succeeds.

Note: "task" accepts a blank name. Creation rejects blank names but editing
never has; that asymmetry is kept as-is.
"""
from datetime import datetime
from typing import Callable, Dict
import logging

from models import Task, format_deadline
from prompts import Prompter

logger = logging.getLogger(__name__)

FIELD_PROMPT = "Input a field to edit (priority, date, time, task):"
INVALID_FIELD = "Invalid field"


def _edit_priority(task: Task, prompter: Prompter) -> None:
    task.priority = prompter.ask_priority()


def _edit_date(task: Task, prompter: Prompter) -> None:
    # keep the existing time of day
    current = task.deadline_datetime()
    task.deadline = format_deadline(datetime.combine(prompter.ask_date(), current.time()))


def _edit_time(task: Task, prompter: Prompter) -> None:
    task.deadline = format_deadline(prompter.ask_time(task.deadline_datetime().date()))


def _edit_name(task: Task, prompter: Prompter) -> None:
    task.name = prompter.ask_name()


FIELD_EDITORS: Dict[str, Callable[[Task, Prompter], None]] = {
    'priority': _edit_priority,
    'date': _edit_date,
    'time': _edit_time,
    'task': _edit_name,
}


def edit_field(task: Task, field: str, prompter: Prompter) -> bool:
    """Apply one field edit in place. False means the field name is unknown."""
    editor = FIELD_EDITORS.get(field)
    if editor is None:
        logger.debug("Unknown field %r", field)
        return False
    editor(task, prompter)
    logger.info("Task field %s changed", field)
    return True


def edit_task(task: Task, prompter: Prompter) -> None:
    """Ask for a field name until a known one is given, then edit it."""
    while not edit_field(task, prompter.ask(FIELD_PROMPT), prompter):
        prompter.write(INVALID_FIELD)
