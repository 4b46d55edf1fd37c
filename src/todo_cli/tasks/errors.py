# src/todo_cli/tasks/errors.py

from __future__ import annotations

from pathlib import Path


class TaskStoreError(Exception):
    """Base class for task store failures."""


class CorruptStoreError(TaskStoreError):
    """The task file exists but does not decode into the task schema."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class InvalidInputError(TaskStoreError, ValueError):
    """Rejected caller input (e.g. an empty task description)."""
