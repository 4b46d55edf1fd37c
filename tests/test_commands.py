# tests/test_commands.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from todo_cli.cli.commands import CommandRegistry, list_filter, registry
from todo_cli.cli.render import render_task_list
from todo_cli.core.state import AppState
from todo_cli.tasks.errors import InvalidInputError
from todo_cli.tasks.task_models import Task, TaskSummary

from .fakes import START, FakeClock, FakeTaskRepo


@pytest.fixture()
def repo_state(clock: FakeClock) -> AppState:
    return AppState(
        settings=SimpleNamespace(),
        task_store=FakeTaskRepo(clock=clock),
        color=False,
        clock=clock,
    )


def test_command_registry_routes_names_and_aliases(state) -> None:
    reg = CommandRegistry(prog="t")
    called: list[str] = []

    def h(state, args):
        called.append(args.command)
        return "ok"

    reg.register("a", h, "a", aliases=["x"])

    assert reg.handle(state, ["a"]) == "ok"
    assert reg.handle(state, ["x"]) == "ok"
    assert called == ["a", "x"]
    assert reg.names() == ["a"]


def test_command_registry_unknown_command_exits() -> None:
    with pytest.raises(SystemExit) as exc:
        registry.parse(["frobnicate"])
    assert exc.value.code == 2


def test_list_flags_are_mutually_exclusive() -> None:
    with pytest.raises(SystemExit):
        registry.parse(["list", "--completed", "--pending"])


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["list"], None),
        (["list", "--completed"], True),
        (["list", "--pending"], False),
        (["ls", "--pending"], False),
    ],
)
def test_list_filter(argv: list[str], expected: bool | None) -> None:
    assert list_filter(registry.parse(argv)) is expected


@pytest.mark.parametrize("argv", [["done", "abc"], ["remove", "1.5"], ["done"], ["add"]])
def test_bad_arguments_are_usage_errors(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        registry.parse(argv)
    assert exc.value.code == 2


def test_add_joins_words(repo_state: AppState) -> None:
    out = registry.handle(repo_state, ["add", "Buy", "oat", "milk"])
    assert out == "Task #1 added successfully!"
    (task,) = repo_state.task_store.list_tasks()
    assert task.description == "Buy oat milk"


def test_add_blank_description_raises(repo_state: AppState) -> None:
    with pytest.raises(InvalidInputError):
        registry.handle(repo_state, ["add", "  "])
    assert repo_state.task_store.count_tasks() == 0


def test_done_and_remove_messages(repo_state: AppState) -> None:
    registry.handle(repo_state, ["add", "Buy milk"])

    assert registry.handle(repo_state, ["done", "1"]) == "Task #1 marked as completed!"
    assert registry.handle(repo_state, ["done", "9"]) == "Error: Task #9 not found."
    assert registry.handle(repo_state, ["rm", "1"]) == "Task #1 removed!"
    assert registry.handle(repo_state, ["remove", "1"]) == "Error: Task #1 not found."
    assert repo_state.task_store.saves == 3


def test_list_distinguishes_empty_store_from_empty_filter(repo_state: AppState) -> None:
    assert registry.handle(repo_state, ["list"]) == "No tasks found."

    registry.handle(repo_state, ["add", "Buy milk"])
    assert registry.handle(repo_state, ["list", "--completed"]) == "No matching tasks found."


def test_list_renders_tasks_and_summary(repo_state: AppState, clock: FakeClock) -> None:
    registry.handle(repo_state, ["add", "Buy milk"])
    registry.handle(repo_state, ["add", "Walk dog"])
    registry.handle(repo_state, ["done", "1"])
    clock.advance(hours=2, minutes=5)

    out = registry.handle(repo_state, ["list"])

    assert "Task #1" in out and "Task #2" in out
    assert "├─ Description: Walk dog" in out
    assert "└─ Completed: 2026-10-17 09:30:00" in out
    assert "└─ Duration: 2 hours, 5 minutes" in out
    assert "Total tasks: 2" in out
    assert "Completed: 1" in out
    assert "Pending: 1" in out
    assert "\033[" not in out


def test_list_pending_filter_keeps_summary_over_all_tasks(repo_state: AppState) -> None:
    registry.handle(repo_state, ["add", "Buy milk"])
    registry.handle(repo_state, ["add", "Walk dog"])
    registry.handle(repo_state, ["done", "1"])

    out = registry.handle(repo_state, ["list", "--pending"])

    assert "Task #2" in out
    assert "Task #1" not in out
    assert "Total tasks: 2" in out


def test_render_uses_ansi_only_when_enabled() -> None:
    tasks = [Task(id=1, description="x", created_at=START)]
    summary = TaskSummary(total=1, completed=0)

    colored = render_task_list(tasks, summary, now=START, color=True)
    plain = render_task_list(tasks, summary, now=START, color=False)

    assert "\033[" in colored
    assert "\033[" not in plain
    assert "Duration: 0 minutes" in plain
