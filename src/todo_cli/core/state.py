# src/todo_cli/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from ..tasks.task_models import local_now
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    task_store: TaskRepo
    color: bool = False

    # Used for "time since created" in listings.
    clock: Callable[[], datetime] = field(default=local_now)
