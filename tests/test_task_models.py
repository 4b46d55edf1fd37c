# tests/test_task_models.py

from __future__ import annotations

from datetime import timedelta

import pytest

from todo_cli.tasks.task_models import Task, TaskStatus, TaskSummary, format_duration

from .fakes import START


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(0), "0 minutes"),
        (timedelta(seconds=59), "0 minutes"),
        (timedelta(minutes=42, seconds=10), "42 minutes"),
        (timedelta(hours=1), "1 hours, 0 minutes"),
        (timedelta(hours=2, minutes=15), "2 hours, 15 minutes"),
        (timedelta(days=1), "1 days, 0 hours"),
        (timedelta(days=3, hours=4, minutes=59), "3 days, 4 hours"),
        (timedelta(minutes=-5), "0 minutes"),
    ],
)
def test_format_duration(delta: timedelta, expected: str) -> None:
    assert format_duration(delta) == expected


def test_elapsed_is_deterministic_for_given_now() -> None:
    task = Task(id=1, description="x", created_at=START)
    now = START + timedelta(hours=5, minutes=3)

    assert task.elapsed(now) == timedelta(hours=5, minutes=3)
    assert format_duration(task.elapsed(now)) == "5 hours, 3 minutes"


def test_elapsed_never_negative() -> None:
    task = Task(id=1, description="x", created_at=START)
    assert task.elapsed(START - timedelta(minutes=1)) == timedelta(0)


def test_status_and_mark_completed() -> None:
    task = Task(id=1, description="x", created_at=START)
    assert task.status is TaskStatus.PENDING

    task.mark_completed(START)
    assert task.status is TaskStatus.COMPLETED
    assert task.completed_at == START


def test_summary_pending() -> None:
    assert TaskSummary(total=5, completed=2).pending == 3
