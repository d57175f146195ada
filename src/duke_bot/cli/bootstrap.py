# src/duke_bot/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- loads the task file (the store creates missing directories),
- wires TaskList, storage and parser into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.parser import CommandParser, ParserMode
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings(). Raises StorageError if
    the task file cannot be created, read or parsed: starting with an empty
    list would break the line-per-task correspondence with the file.
    """
    if settings is None:
        settings = get_settings()

    storage = TaskFileStore(settings.tasks_path)
    task_list = TaskList(storage.load())

    parser = CommandParser(ParserMode.from_config(getattr(settings, "parser_mode", None)))
    logger.info(
        "State ready: %d task(s), file=%s, parser=%s",
        len(task_list),
        settings.tasks_path,
        parser.mode.value,
    )

    return AppState(
        settings=settings,
        task_list=task_list,
        storage=storage,
        parser=parser,
    )
