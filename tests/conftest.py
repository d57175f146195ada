# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from duke_bot.cli.bootstrap import create_initial_state
from duke_bot.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    A SimpleNamespace rather than the real config keeps tests isolated from
    the developer's environment and .env file.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="duke-test",
        log_level="WARNING",
        parser_mode="anchored",
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
        log_dir=data_dir,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState backed by a real task file under tmp_path."""
    return create_initial_state(settings=settings)


@pytest.fixture()
def tasks_file(settings: SimpleNamespace) -> Path:
    return settings.tasks_path
