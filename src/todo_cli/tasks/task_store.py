# src/todo_cli/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from .errors import InvalidInputError
from .task_codec import load_tasks, save_tasks
from .task_models import Task, TaskSummary, local_now

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON-file task store.

    The in-memory list is the source of truth; the file is its serialization:
    - loaded once in the constructor (missing file -> empty, corrupt -> CorruptStoreError)
    - rewritten after every successful mutation

    Save failures are logged and recorded in `last_save_error`, but the mutation
    is NOT rolled back: memory and disk may differ until the next good save.

    No file locking: two processes writing the same file race, last writer wins.
    """

    def __init__(
        self,
        path: str | Path = "tasks.json",
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._path = Path(path)
        self._clock = clock or local_now
        self._tasks: list[Task] = load_tasks(self._path, clock=self._clock)
        self.last_save_error: OSError | None = None
        logger.info("TaskStore ready path=%s total=%s", self._path, len(self._tasks))

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _save(self) -> bool:
        try:
            save_tasks(self._path, self._tasks)
        except OSError as e:
            self.last_save_error = e
            logger.warning("Failed to save tasks to %s: %s", self._path, e)
            return False
        self.last_save_error = None
        return True

    def _next_id(self) -> int:
        # Last element + 1, not max + 1: removing the tail task lets its id be reused.
        if not self._tasks:
            return 1
        return self._tasks[-1].id + 1

    def _find(self, task_id: int) -> int | None:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                return idx
        return None

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def summary(self) -> TaskSummary:
        """Counts over the whole collection (ignores any list filter)."""
        done = sum(1 for t in self._tasks if t.completed)
        return TaskSummary(total=len(self._tasks), completed=done)

    def get_task(self, task_id: int) -> Task | None:
        idx = self._find(task_id)
        return self._tasks[idx] if idx is not None else None

    def add_task(self, description: str) -> Task:
        description = (description or "").strip()
        if not description:
            raise InvalidInputError("description is required")

        task = Task(
            id=self._next_id(),
            description=description,
            completed=False,
            created_at=self._clock(),
            completed_at=None,
        )
        self._tasks.append(task)
        self._save()
        logger.debug("Task added id=%s", task.id)
        return task

    def list_tasks(self, completed: bool | None = None) -> list[Task]:
        """
        Return tasks in stored order.

        completed=None  -> all tasks
        completed=True  -> only completed tasks
        completed=False -> only pending tasks
        """
        if completed is None:
            return list(self._tasks)
        return [t for t in self._tasks if t.completed == completed]

    def complete_task(self, task_id: int) -> bool:
        """Mark the first task with `task_id` completed. False if there is none."""
        idx = self._find(task_id)
        if idx is None:
            logger.debug("complete_task: id=%s not found", task_id)
            return False

        self._tasks[idx].mark_completed(self._clock())
        self._save()
        logger.debug("Task completed id=%s", task_id)
        return True

    def remove_task(self, task_id: int) -> bool:
        """Remove the first task with `task_id`. False if there is none."""
        idx = self._find(task_id)
        if idx is None:
            logger.debug("remove_task: id=%s not found", task_id)
            return False

        del self._tasks[idx]
        self._save()
        logger.debug("Task removed id=%s", task_id)
        return True
