# src/todo_cli/cli/render.py

"""Plain-text rendering of tasks, with optional ANSI colors."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from ..tasks.task_models import Task, TaskSummary, format_duration

RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"

RULE_WIDTH = 50
TS_FORMAT = "%Y-%m-%d %H:%M:%S"


class Palette:
    """Applies ANSI styles only when enabled."""

    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def __call__(self, text: str, *styles: str) -> str:
        if not self.enabled or not styles:
            return text
        return "".join(styles) + text + RESET


def _fmt_ts(ts: datetime | None) -> str:
    return ts.strftime(TS_FORMAT) if ts is not None else "-"


def render_task(task: Task, now: datetime, c: Palette) -> list[str]:
    mark = c("✓", GREEN) if task.completed else c("○", RED)
    status = c("Completed", GREEN) if task.completed else c("Pending", YELLOW)
    lines = [
        "",
        f"{mark} Task #{c(str(task.id), CYAN)}",
        f"├─ Description: {task.description}",
        f"├─ Status: {status}",
        f"├─ Created: {c(_fmt_ts(task.created_at), BLUE)}",
    ]
    if task.completed_at is not None:
        lines.append(f"└─ Completed: {c(_fmt_ts(task.completed_at), GREEN)}")
    else:
        lines.append(f"└─ Duration: {c(format_duration(task.elapsed(now)), MAGENTA)}")
    lines.append("-" * RULE_WIDTH)
    return lines


def render_summary(summary: TaskSummary, c: Palette) -> list[str]:
    return [
        "",
        c("=== Summary ===", BOLD),
        f"Total tasks: {c(str(summary.total), CYAN)}",
        f"Completed: {c(str(summary.completed), GREEN)}",
        f"Pending: {c(str(summary.pending), YELLOW)}",
        "=" * RULE_WIDTH,
    ]


def render_task_list(
    tasks: Iterable[Task],
    summary: TaskSummary,
    *,
    now: datetime,
    color: bool = False,
) -> str:
    """
    Full listing: one block per task, then counts over the whole collection.

    Distinguishes an empty store from a filter that matched nothing.
    """
    c = Palette(color)
    tasks = list(tasks)

    if summary.total == 0:
        return c("No tasks found.", YELLOW)
    if not tasks:
        return c("No matching tasks found.", YELLOW)

    lines = ["", c("=== Tasks ===", BOLD), "=" * RULE_WIDTH]
    for task in tasks:
        lines.extend(render_task(task, now, c))
    lines.extend(render_summary(summary, c))
    return "\n".join(lines)
