# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_cli.core.state import AppState
from todo_cli.tasks.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def settings(tmp_path: Path, tasks_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        data_dir=tmp_path,
        tasks_file_path=tasks_path,
        log_file_path=tmp_path / "todo.log",
        log_to_file=False,
        console_log_level=30,
        color=False,
    )


@pytest.fixture()
def store(tasks_path: Path, clock: FakeClock) -> TaskStore:
    return TaskStore(tasks_path, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, clock: FakeClock) -> AppState:
    """
    AppState wired with a real TaskStore on a tmp file and a fake clock.
    """
    return AppState(settings=settings, task_store=store, color=False, clock=clock)
