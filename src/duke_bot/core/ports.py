# src/duke_bot/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Commands depend on this Protocol instead of TaskFileStore, which keeps the
storage swappable and lets tests inject failing or recording fakes.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskStorage(Protocol):
    def load(self) -> list[Task]: ...
    def append_line(self, encoded: str) -> None: ...
    def update_done_flag(self, task_num: int, done: bool = True) -> None: ...
    def delete_line(self, task_num: int) -> None: ...
