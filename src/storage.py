"""Persistence helpers (load/save) for the task list.

The store is a JSON array of records with keys, in order:
"name", "priority" (C/H/N/L) and "deadlineDateTime" ("YYYY-MM-DD HH:MM").
Saving replaces the whole file; there is no locking or atomic rename.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from models import Task

DEFAULT_TASKS_FILE = Path('tasklist.json')

TaskEntry = Dict[str, Any]

logger = logging.getLogger(__name__)


class Storage:
    def __init__(self, path: Union[str, Path] = DEFAULT_TASKS_FILE):
        self.path = Path(path)

    def load_tasks(self) -> List[Task]:
        """Load tasks from disk in stored order.

        Missing file -> empty list. Malformed content raises ValueError
        (bad JSON, unknown priority, bad deadline), KeyError (missing key)
        or TypeError (a record that is not an object).
        """
        if not self.path.exists():
            logger.info("No task file at %s; starting empty", self.path)
            return []
        with open(self.path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array in {self.path}")
        tasks = [Task.from_dict(raw) for raw in data]
        logger.info("Loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        """Persist tasks to disk (pretty-printed), replacing previous contents."""
        entries: List[TaskEntry] = [task.to_dict() for task in tasks]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(entries, f, indent=4, ensure_ascii=False)
        logger.info("Saved %d task(s) to %s", len(entries), self.path)
