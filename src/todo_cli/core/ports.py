# src/todo_cli/core/ports.py

"""
Ports (interfaces) used by the command layer.

Commands depend on this Protocol instead of the concrete TaskStore,
which keeps storage swappable and makes testing easier.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..tasks.task_models import Task, TaskSummary


class TaskRepo(Protocol):
    last_save_error: OSError | None

    @property
    def path(self) -> Path: ...

    # Queries
    def count_tasks(self) -> int: ...
    def summary(self) -> TaskSummary: ...
    def get_task(self, task_id: int) -> Task | None: ...
    def list_tasks(self, completed: bool | None = None) -> list[Task]: ...

    # Mutations (each one persists before returning)
    def add_task(self, description: str) -> Task: ...
    def complete_task(self, task_id: int) -> bool: ...
    def remove_task(self, task_id: int) -> bool: ...
