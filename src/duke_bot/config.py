# src/duke_bot/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "DUKE"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Parsing ----
    parser_mode: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path
    log_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "duke").strip() or "duke"
        # Console only; the log file always gets DEBUG.
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        # Validated by ParserMode.from_config when the parser is built.
        parser_mode = _env(_k("PARSER_MODE"), "anchored")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/duke"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.txt")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            parser_mode=parser_mode,
            data_dir=data_dir,
            tasks_path=tasks_path,
            log_dir=log_dir,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
# Prefer .env; use config_local.py only for a few explicit overrides.
try:
    import config_local as _config_local  # type: ignore

    if hasattr(_config_local, "PARSER_MODE"):
        object.__setattr__(SETTINGS, "parser_mode", str(_config_local.PARSER_MODE))  # type: ignore[misc]
    if hasattr(_config_local, "TASKS_PATH"):
        object.__setattr__(SETTINGS, "tasks_path", Path(_config_local.TASKS_PATH).expanduser())  # type: ignore[misc]
except ImportError:
    pass


def get_settings() -> Settings:
    return SETTINGS
