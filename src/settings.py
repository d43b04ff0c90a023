"""Settings loaded from environment variables (+ optional .env).

Variables (all optional):
    TASKLIST_FILE       task store path (default: tasklist.json)
    TASKLIST_LOG_DIR    directory for tasklist.log (default: .local/tasklist)
    TASKLIST_LOG_LEVEL  console log level (default: WARNING)

Real environment variables win over values from .env.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_path(name: str, default: Path) -> Path:
    return Path(_env(name, str(default))).expanduser()


@dataclass(frozen=True)
class Settings:
    task_file: Path
    log_dir: Path
    log_level: str

    @staticmethod
    def from_env(dotenv_path: Optional[Path] = None) -> "Settings":
        load_dotenv(dotenv_path=dotenv_path, override=False)
        return Settings(
            task_file=_env_path(_k("FILE"), Path("tasklist.json")),
            log_dir=_env_path(_k("LOG_DIR"), Path(".local/tasklist")),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").upper(),
        )
