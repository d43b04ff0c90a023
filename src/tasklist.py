"""Task list logic: holds the ordered tasks and the add/print/edit/delete flows.

The TaskList owns every Task instance. It is built empty or from loaded
tasks, mutated in place during the session and handed back to storage on
exit. Tasks are addressed by 1-based position as shown in the table.
"""
from datetime import datetime
from typing import Callable, Iterable, List, Optional
import logging

from editor import edit_task
from models import Task, format_deadline, utc_now
from prompts import Prompter
from table import render

logger = logging.getLogger(__name__)

BLANK_TASK = "The task is blank"
TASK_CHANGED = "The task is changed"
TASK_DELETED = "The task is deleted"


class TaskList:
    def __init__(
        self,
        tasks: Optional[Iterable[Task]] = None,
        prompter: Optional[Prompter] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.tasks: List[Task] = list(tasks) if tasks else []
        self.prompter: Prompter = prompter or Prompter()
        self.clock = clock

    def __len__(self) -> int:
        return len(self.tasks)

    # -------------------- collection --------------------
    def add(self, task: Task) -> None:
        self.tasks.append(task)
        logger.info("Task added (total=%d, deadline=%s)", len(self.tasks), task.deadline)

    def get(self, index: int) -> Task:
        """Zero-based lookup; raises IndexError when out of range."""
        if not 0 <= index < len(self.tasks):
            raise IndexError(f"task index out of range: {index}")
        return self.tasks[index]

    def delete(self, index: int) -> Task:
        task = self.get(index)
        del self.tasks[index]
        logger.info("Task #%d deleted (total=%d)", index + 1, len(self.tasks))
        return task

    # -------------------- user-interactive flows --------------------
    def create_task(self) -> Optional[Task]:
        """Priority, date, time, then name. None if the name came back blank."""
        priority = self.prompter.ask_priority()
        day = self.prompter.ask_date()
        deadline = self.prompter.ask_time(day)
        name = self.prompter.ask_name()
        if not name.strip():
            self.prompter.write(BLANK_TASK)
            return None
        return Task(name=name, priority=priority, deadline=format_deadline(deadline))

    def add_task(self) -> None:
        task = self.create_task()
        if task is not None:
            self.add(task)

    def print_tasks(self) -> None:
        self.prompter.write(render(self.tasks, self.clock()))

    def edit_task(self) -> None:
        self.print_tasks()
        if not self.tasks:
            return
        index = self.prompter.ask_index(len(self.tasks))
        edit_task(self.get(index), self.prompter)
        self.prompter.write(TASK_CHANGED)

    def delete_task(self) -> None:
        self.print_tasks()
        if not self.tasks:
            return
        self.delete(self.prompter.ask_index(len(self.tasks)))
        self.prompter.write(TASK_DELETED)

    def __str__(self) -> str:
        return f'Tasks: {len(self.tasks)}'
