# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file
in the current directory). Real environment variables always win over .env values.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # Paths
    "TODO_DATA_DIR": "Data directory (default: $XDG_DATA_HOME/todo-cli or ~/.local/share/todo-cli).",
    "TODO_TASKS_FILE": "Task file path (default: <TODO_DATA_DIR>/tasks.json).",
    # Logging
    "TODO_LOG_LEVEL": "Console log level on stderr (default: WARNING).",
    "TODO_LOG_TO_FILE": "Also write full DEBUG logs to <TODO_DATA_DIR>/todo.log (default: true).",
    # Output
    "TODO_COLOR": "Force ANSI colors on/off (default: on for a TTY unless NO_COLOR is set).",
}
