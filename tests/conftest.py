# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.core.state import AppState
from todo_tracker.logging_setup import teardown_logging
from todo_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than Settings.from_env(),
    to keep unit tests isolated from the caller's environment and .env file.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="WARNING",
        log_dir=None,
        tasks_path=tmp_path / "todo.json",
        atomic_writes=True,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path, atomic_writes=settings.atomic_writes)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState wired with a real TaskStore in tmp_path."""
    return AppState(settings=settings, task_store=store)


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    # main() installs handlers bound to the captured stderr of that test.
    teardown_logging(logging.getLogger())
