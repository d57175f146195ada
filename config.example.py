# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "DUKE_APP_NAME": "App display name (default: duke).",
    "DUKE_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    "DUKE_LOG_DIR": "Directory for duke.log (default: <data_dir>).",
    # Parsing
    "DUKE_PARSER_MODE": (
        "anchored (default): the command keyword must be the first word. "
        "legacy: first known keyword found anywhere in the line wins."
    ),
    # Paths (gitignored)
    "DUKE_DATA_DIR": "Local data directory (default: .local/duke).",
    "DUKE_TASKS_PATH": "Task file path (default: <data_dir>/tasks.txt).",
}
