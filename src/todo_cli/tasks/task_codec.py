# src/todo_cli/tasks/task_codec.py

"""
JSON codec for the task file.

File format: a JSON array of objects, one per task, in stored order:

    [
      {
        "id": 1,
        "description": "Buy milk",
        "completed": false,
        "created_at": "2026-10-17T09:30:00.123456+02:00",
        "completed_at": null
      }
    ]

Rules:
- missing file -> empty collection (not an error)
- present but undecodable file -> CorruptStoreError
- save rewrites the whole file via a temp file + os.replace
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import re
import tempfile
from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path
from typing import Any

from .errors import CorruptStoreError
from .task_models import Task, local_now

logger = logging.getLogger(__name__)

# datetime.fromisoformat() accepts at most microseconds; other writers may emit nanoseconds.
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def _ts_to_str(ts: datetime | None) -> str | None:
    return ts.isoformat() if ts is not None else None


def _str_to_ts(raw: Any, *, field: str, path: Path) -> datetime:
    if not isinstance(raw, str):
        raise CorruptStoreError(path, f"{field} must be a timestamp string, got {raw!r}")
    try:
        ts = datetime.fromisoformat(_FRACTION_RE.sub(r"\1", raw.strip()))
    except ValueError as e:
        raise CorruptStoreError(path, f"{field} is not an ISO-8601 timestamp: {raw!r}") from e
    # Naive timestamps are taken as local time.
    return ts if ts.tzinfo is not None else ts.astimezone()


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "description": task.description,
        "completed": task.completed,
        "created_at": _ts_to_str(task.created_at),
        "completed_at": _ts_to_str(task.completed_at),
    }


def task_from_dict(raw: Any, *, path: Path, now: datetime) -> Task:
    if not isinstance(raw, dict):
        raise CorruptStoreError(path, f"task entry must be an object, got {type(raw).__name__}")

    tid = raw.get("id")
    # bool is an int subclass; reject it explicitly.
    if not isinstance(tid, int) or isinstance(tid, bool) or tid < 1:
        raise CorruptStoreError(path, f"id must be a positive integer, got {tid!r}")

    description = raw.get("description")
    if not isinstance(description, str):
        raise CorruptStoreError(path, f"task {tid}: description must be a string")

    completed = raw.get("completed")
    if not isinstance(completed, bool):
        raise CorruptStoreError(path, f"task {tid}: completed must be a boolean")

    raw_created = raw.get("created_at")
    created_at = now if raw_created is None else _str_to_ts(raw_created, field="created_at", path=path)

    raw_completed = raw.get("completed_at")
    completed_at = (
        None if raw_completed is None else _str_to_ts(raw_completed, field="completed_at", path=path)
    )

    return Task(
        id=tid,
        description=description,
        completed=completed,
        created_at=created_at,
        completed_at=completed_at,
    )


def load_tasks(path: str | Path, *, clock: Callable[[], datetime] = local_now) -> list[Task]:
    """
    Load the task collection from `path`.

    Tasks come back exactly as encoded: ids, order and flags are not re-validated
    against each other. A task without created_at gets the current time.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("Task file %s does not exist; starting empty.", path)
        return []

    try:
        data = json.loads(raw.decode("utf-8"))
    except json.JSONDecodeError as e:
        raise CorruptStoreError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e
    except UnicodeDecodeError as e:
        raise CorruptStoreError(path, "file is not valid UTF-8") from e

    if not isinstance(data, list):
        raise CorruptStoreError(path, f"expected a JSON array, got {type(data).__name__}")

    now = clock()
    tasks = [task_from_dict(item, path=path, now=now) for item in data]
    logger.debug("Loaded %d tasks from %s", len(tasks), path)
    return tasks


def dumps_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([task_to_dict(t) for t in tasks], ensure_ascii=False, indent=2) + "\n"


def save_tasks(path: str | Path, tasks: Iterable[Task]) -> None:
    """
    Rewrite the whole task file atomically.

    Raises OSError on failure (missing parent dir, permissions, disk full).
    The target is left untouched when the write fails.
    """
    path = Path(path)
    payload = dumps_tasks(tasks)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise
    logger.debug("Saved task file %s (%d bytes)", path, len(payload.encode("utf-8")))
