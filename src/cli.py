"""Command loop for the task list.

Reads one action per line and runs the matching TaskList flow. The task
list is saved once when the session ends, whether by "end", end of input
or Ctrl-C.
"""
import logging
from typing import Callable, Dict

from storage import Storage
from tasklist import TaskList

logger = logging.getLogger(__name__)

ACTION_PROMPT = "Input an action (add, print, edit, delete, end):"
INVALID_ACTION = "The input action is invalid"
EXIT_MESSAGE = "Tasklist exiting!"


class CLI:
    def __init__(self, task_list: TaskList, storage: Storage):
        self.task_list: TaskList = task_list
        self.storage: Storage = storage
        self.actions: Dict[str, Callable[[], None]] = {
            'add': task_list.add_task,
            'print': task_list.print_tasks,
            'edit': task_list.edit_task,
            'delete': task_list.delete_task,
        }

    def run(self) -> None:
        """Main REPL loop; returns after the task list has been saved."""
        prompter = self.task_list.prompter
        logger.info("Session started with %s", self.task_list)
        try:
            while True:
                command = prompter.ask(ACTION_PROMPT)
                if command == 'end':
                    break
                self._handle_command(command)
        except (KeyboardInterrupt, EOFError):
            logger.info("Input closed; ending session")
        prompter.write(EXIT_MESSAGE)
        self.storage.save_tasks(self.task_list.tasks)

    def _handle_command(self, command: str) -> None:
        action = self.actions.get(command)
        if action is None:
            logger.debug("Unknown action %r", command)
            self.task_list.prompter.write(INVALID_ACTION)
            return
        action()
