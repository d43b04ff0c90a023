# tests/conftest.py

from __future__ import annotations

import logging
from datetime import datetime

import pytest

from .fakes import FIXED_NOW


@pytest.fixture(autouse=True)
def restore_logging():
    """The entry point reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.fixture()
def now() -> datetime:
    return FIXED_NOW
