# tests/test_settings.py

from __future__ import annotations

from pathlib import Path

import pytest

from settings import Settings

ENV_VARS = ("TASKLIST_FILE", "TASKLIST_LOG_DIR", "TASKLIST_LOG_LEVEL")


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    # setenv first so teardown also removes whatever load_dotenv writes
    for name in ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env, tmp_path: Path) -> None:
    settings = Settings.from_env(dotenv_path=tmp_path / "missing.env")
    assert settings.task_file == Path("tasklist.json")
    assert settings.log_dir == Path(".local/tasklist")
    assert settings.log_level == "WARNING"


def test_dotenv_fills_gaps_but_env_wins(clean_env, tmp_path: Path) -> None:
    dotenv = tmp_path / ".env"
    dotenv.write_text("TASKLIST_FILE=from_dotenv.json\nTASKLIST_LOG_LEVEL=debug\n", encoding="utf-8")
    clean_env.setenv("TASKLIST_FILE", str(tmp_path / "from_env.json"))

    settings = Settings.from_env(dotenv_path=dotenv)
    assert settings.task_file == tmp_path / "from_env.json"
    assert settings.log_level == "DEBUG"
