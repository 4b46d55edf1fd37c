# src/todo_cli/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass

from .. import __version__
from ..core.state import AppState
from ..tasks.errors import InvalidInputError
from .render import GREEN, RED, Palette, render_task_list

CommandHandler = Callable[[AppState, argparse.Namespace], str]
ArgsConfigurator = Callable[[argparse.ArgumentParser], None]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Command:
    name: str
    handler: CommandHandler
    help_text: str
    aliases: tuple[str, ...]
    configure: ArgsConfigurator | None


class CommandRegistry:
    """Subcommand registry: builds the argparse parser and routes parsed args to handlers."""

    def __init__(self, prog: str = "todo") -> None:
        self.prog = prog
        self._commands: dict[str, _Command] = {}
        self._handlers: dict[str, CommandHandler] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        configure: ArgsConfigurator | None = None,
    ) -> None:
        key = name.lower()
        cmd = _Command(key, handler, help_text, tuple(a.lower() for a in aliases or []), configure)
        self._commands[key] = cmd
        self._handlers[key] = handler
        for alias in cmd.aliases:
            self._handlers[alias] = handler

    def names(self) -> list[str]:
        return list(self._commands)

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=self.prog,
            description="Track a simple list of tasks from the command line.",
        )
        parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
        sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
        for cmd in self._commands.values():
            p = sub.add_parser(cmd.name, help=cmd.help_text, aliases=list(cmd.aliases))
            if cmd.configure is not None:
                cmd.configure(p)
        return parser

    def parse(self, argv: list[str] | None = None) -> argparse.Namespace:
        """Parse argv. argparse exits (SystemExit 2) on usage errors."""
        return self.build_parser().parse_args(argv)

    def dispatch(self, state: AppState, args: argparse.Namespace) -> str:
        name = str(args.command).lower()
        handler = self._handlers.get(name)
        if handler is None:
            return f"Unknown command: {name}. Use --help to list available commands."
        logger.debug("Dispatching command %s", name)
        return handler(state, args)

    def handle(self, state: AppState, argv: list[str]) -> str:
        return self.dispatch(state, self.parse(argv))


registry = CommandRegistry()


def _task_id(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid task id: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid task id: {raw!r}")
    return value


def _configure_add(p: argparse.ArgumentParser) -> None:
    p.add_argument("description", nargs="+", help="task description (words are joined)")


def _configure_list(p: argparse.ArgumentParser) -> None:
    group = p.add_mutually_exclusive_group()
    group.add_argument("--completed", action="store_true", help="show only completed tasks")
    group.add_argument("--pending", action="store_true", help="show only pending tasks")


def _configure_id(p: argparse.ArgumentParser) -> None:
    p.add_argument("id", type=_task_id, help="task id")


def list_filter(args: argparse.Namespace) -> bool | None:
    if getattr(args, "completed", False):
        return True
    if getattr(args, "pending", False):
        return False
    return None


def cmd_add(state: AppState, args: argparse.Namespace) -> str:
    description = " ".join(args.description).strip()
    if not description:
        raise InvalidInputError("Task description must not be empty.")
    task = state.task_store.add_task(description)
    return Palette(state.color)(f"Task #{task.id} added successfully!", GREEN)


def cmd_list(state: AppState, args: argparse.Namespace) -> str:
    store = state.task_store
    tasks = store.list_tasks(list_filter(args))
    return render_task_list(tasks, store.summary(), now=state.clock(), color=state.color)


def _not_found(state: AppState, task_id: int) -> str:
    c = Palette(state.color)
    msg = f"Task #{task_id} not found."
    return f"{c('Error:', RED)} {c(msg, RED)}"


def cmd_done(state: AppState, args: argparse.Namespace) -> str:
    if not state.task_store.complete_task(args.id):
        return _not_found(state, args.id)
    return Palette(state.color)(f"Task #{args.id} marked as completed!", GREEN)


def cmd_remove(state: AppState, args: argparse.Namespace) -> str:
    if not state.task_store.remove_task(args.id):
        return _not_found(state, args.id)
    return Palette(state.color)(f"Task #{args.id} removed!", GREEN)


registry.register("add", cmd_add, help_text="Add a new task.", configure=_configure_add)
registry.register(
    "list", cmd_list, help_text="List tasks: --completed | --pending.", aliases=["ls"],
    configure=_configure_list,
)
registry.register("done", cmd_done, help_text="Mark a task as completed.", configure=_configure_id)
registry.register(
    "remove", cmd_remove, help_text="Remove a task.", aliases=["rm"], configure=_configure_id
)
