"""Main entry point for the terminal task list."""
import logging
from pathlib import Path
from typing import Optional

import click

from cli import CLI
from logging_setup import setup_logging
from settings import Settings
from storage import Storage
from tasklist import TaskList

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.command()
@click.option(
    "--file", "task_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Task store (JSON). Defaults to $TASKLIST_FILE or ./tasklist.json.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Console log level. Defaults to $TASKLIST_LOG_LEVEL or WARNING.",
)
def main(task_file: Optional[Path], log_level: Optional[str]) -> None:
    """Interactive task list: add, print, edit and delete tasks."""
    settings = Settings.from_env()
    level_name = (log_level or settings.log_level).upper()
    setup_logging(log_dir=settings.log_dir, console_level=getattr(logging, level_name, logging.WARNING))

    storage = Storage(task_file or settings.task_file)
    try:
        tasks = storage.load_tasks()
    except (ValueError, KeyError, TypeError) as exc:
        logger.error("Cannot load %s: %s", storage.path, exc)
        raise click.ClickException(f"Cannot read task file {storage.path}: {exc}") from exc

    CLI(TaskList(tasks), storage).run()


if __name__ == "__main__":
    main()
