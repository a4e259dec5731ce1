# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.cli.bootstrap import create_initial_state
from task_tracker.core.state import AppState
from task_tracker.tasks.task_manager import TaskManager
from task_tracker.tasks.task_store import JsonTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    A SimpleNamespace rather than config.Settings keeps tests independent of the environment.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="task-tracker-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks_database.json",
    )


@pytest.fixture()
def store(tmp_path: Path) -> JsonTaskStore:
    return JsonTaskStore(tmp_path / "tasks_database.json")


@pytest.fixture()
def manager(store: JsonTaskStore) -> TaskManager:
    return TaskManager(store)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with a real JSON store under tmp_path."""
    return create_initial_state(settings=settings)
