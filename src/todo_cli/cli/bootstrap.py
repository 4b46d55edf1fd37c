# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures the data directory exists (best-effort),
- wires the concrete TaskStore into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    # A failure here is not fatal; the first save will report it.
    for d in {settings.data_dir, settings.tasks_file_path.parent}:
        try:
            d.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Failed to create data directory %s: %s", d, e)


def create_initial_state(*, settings=None, clock=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    Raises CorruptStoreError if the task file exists but cannot be decoded.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_file_path, clock=clock)
    state = AppState(
        settings=settings,
        task_store=store,
        color=bool(getattr(settings, "color", False)),
    )
    if clock is not None:
        state.clock = clock
    return state
