# src/duke_bot/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .parser import CommandParser
from .ports import TaskStorage


@dataclass
class AppState:
    # Settings are kept on the state for easy access from connectors.
    settings: object

    task_list: TaskList
    storage: TaskStorage
    parser: CommandParser
