# src/todo_cli/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- The task file location is a plain value injected into TaskStore, never global state.
- Nothing is read from the environment at import time.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"
APP_DIR_NAME = "todo-cli"
TASKS_FILE_NAME = "tasks.json"
LOG_FILE_NAME = "todo.log"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _default_data_dir() -> Path:
    """
    Per-user data directory:
    $XDG_DATA_HOME/todo-cli, else ~/.local/share/todo-cli.
    Falls back to the current directory when no home directory can be resolved.
    """
    xdg = os.getenv("XDG_DATA_HOME")
    if xdg and xdg.strip():
        return Path(xdg).expanduser() / APP_DIR_NAME
    try:
        home = Path.home()
    except RuntimeError:
        return Path(".")
    return home / ".local" / "share" / APP_DIR_NAME


def _default_color() -> bool:
    if os.getenv("NO_COLOR") is not None:
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Paths ----
    data_dir: Path
    tasks_file_path: Path

    # ---- Logging ----
    log_level: str
    log_to_file: bool

    # ---- Output ----
    color: bool

    @property
    def log_file_path(self) -> Path:
        return self.data_dir / LOG_FILE_NAME

    @property
    def console_log_level(self) -> int:
        return _log_level(self.log_level)

    @staticmethod
    def from_env() -> "Settings":
        data_dir = _env_path(_k("DATA_DIR"), _default_data_dir())
        tasks_file_path = _env_path(_k("TASKS_FILE"), data_dir / TASKS_FILE_NAME)

        return Settings(
            data_dir=data_dir,
            tasks_file_path=tasks_file_path,
            log_level=_env(_k("LOG_LEVEL"), "WARNING"),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            color=_env_bool(_k("COLOR"), _default_color()),
        )


_SETTINGS: Settings | None = None


def get_settings(*, reload: bool = False) -> Settings:
    """Load .env (without overriding real env vars) and build Settings once."""
    global _SETTINGS
    if _SETTINGS is None or reload:
        load_dotenv(find_dotenv(usecwd=True), override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
