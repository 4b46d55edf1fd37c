# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Parses arguments, initializes logging, builds AppState, runs exactly one command.

Exit codes:
- 0: success, including "task not found" and a failed (warned) save
- 1: the task file exists but is corrupt or unreadable
- 2: usage error / invalid input
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.errors import CorruptStoreError, InvalidInputError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def main(argv: list[str] | None = None, *, settings=None, clock=None) -> int:
    # argparse exits on --help / --version / usage errors before anything touches disk.
    args = registry.parse(argv)

    if settings is None:
        settings = get_settings()

    setup_logging(
        log_file=settings.log_file_path if settings.log_to_file else None,
        console_level=settings.console_log_level,
    )
    logger.debug("Running command %s (tasks=%s)", args.command, settings.tasks_file_path)

    try:
        state = create_initial_state(settings=settings, clock=clock)
    except CorruptStoreError as e:
        logger.error("Corrupt task file %s: %s", e.path, e.reason)
        print(f"Error: task file {e.path} is corrupt: {e.reason}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as e:
        logger.error("Cannot read task file %s: %s", settings.tasks_file_path, e)
        print(f"Error: cannot read task file {settings.tasks_file_path}: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        output = registry.dispatch(state, args)
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    print(output)

    store = state.task_store
    if store.last_save_error is not None:
        print(
            f"Warning: failed to save tasks to {store.path} ({store.last_save_error})",
            file=sys.stderr,
        )

    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
