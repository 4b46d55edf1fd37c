# src/todo_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import StrEnum


def local_now() -> datetime:
    """Current time as an aware datetime in the local timezone."""
    return datetime.now().astimezone()


class TaskStatus(StrEnum):
    """
    Derived view of Task.completed.

    Not persisted: the file only stores the boolean.
    There is no transition back from COMPLETED to PENDING.
    """

    PENDING = "pending"
    COMPLETED = "completed"


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False
    created_at: datetime | None = None
    completed_at: datetime | None = None

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.COMPLETED if self.completed else TaskStatus.PENDING

    def mark_completed(self, now: datetime) -> None:
        # Re-completing overwrites the timestamp.
        self.completed = True
        self.completed_at = now

    def elapsed(self, now: datetime) -> timedelta:
        """Time since creation, never negative."""
        if self.created_at is None:
            return timedelta(0)
        delta = now - self.created_at
        return max(delta, timedelta(0))


@dataclass(frozen=True, slots=True)
class TaskSummary:
    total: int
    completed: int

    @property
    def pending(self) -> int:
        return self.total - self.completed


def format_duration(delta: timedelta) -> str:
    """
    Render a duration in its two largest units:
    - "3 days, 4 hours"
    - "2 hours, 15 minutes"
    - "42 minutes"
    """
    total_seconds = max(0, int(delta.total_seconds()))
    days = total_seconds // (24 * 3600)
    hours = (total_seconds % (24 * 3600)) // 3600
    minutes = (total_seconds % 3600) // 60

    if days > 0:
        return f"{days} days, {hours} hours"
    if hours > 0:
        return f"{hours} hours, {minutes} minutes"
    return f"{minutes} minutes"
