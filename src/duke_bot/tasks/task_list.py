# src/duke_bot/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..errors import TaskIndexError
from .task_models import Task


class TaskList:
    """Ordered collection of tasks, numbered from 1 for the user."""

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def check_task_num(self, task_num: int) -> None:
        if task_num < 1 or task_num > len(self._tasks):
            raise TaskIndexError(task_num, len(self._tasks))

    def get(self, task_num: int) -> Task:
        self.check_task_num(task_num)
        return self._tasks[task_num - 1]

    def add(self, task: Task) -> int:
        """Append a task; returns the new size."""
        self._tasks.append(task)
        return len(self._tasks)

    def mark_done(self, task_num: int) -> Task:
        task = self.get(task_num)
        task.mark_done()
        return task

    def delete(self, task_num: int) -> Task:
        self.check_task_num(task_num)
        return self._tasks.pop(task_num - 1)

    def find(self, keyword: str) -> list[Task]:
        """Tasks whose description contains `keyword` (case-sensitive), in list order."""
        return [t for t in self._tasks if keyword in t.description]
