# src/duke_bot/core/commands.py

"""
Executable commands.

Each command is a small frozen dataclass; `execute_command` dispatches on the
variant. Storage is written before the in-memory list changes, so a failed
write leaves the list exactly as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task, TaskKind, encode_task
from .ports import TaskStorage

logger = logging.getLogger(__name__)

EXIT_MESSAGE = "Bye. Hope to see you again soon!"
EMPTY_LIST_MESSAGE = "Your task list is empty."


@dataclass(frozen=True, slots=True)
class AddCommand:
    kind: TaskKind
    description: str
    when: str | None = None


@dataclass(frozen=True, slots=True)
class DoneCommand:
    task_num: int


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    task_num: int


@dataclass(frozen=True, slots=True)
class FindCommand:
    keyword: str


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class HelpCommand:
    text: str


@dataclass(frozen=True, slots=True)
class ExitCommand:
    pass


Command = (
    AddCommand
    | DoneCommand
    | DeleteCommand
    | FindCommand
    | ListCommand
    | HelpCommand
    | ExitCommand
)


def is_exit(command: Command) -> bool:
    return isinstance(command, ExitCommand)


def _numbered(tasks: list[Task]) -> list[str]:
    return [f"{i}. {t}" for i, t in enumerate(tasks, start=1)]


def _add(cmd: AddCommand, task_list: TaskList, storage: TaskStorage) -> str:
    task = Task(kind=cmd.kind, description=cmd.description, when=cmd.when)
    storage.append_line(encode_task(task))
    size = task_list.add(task)
    logger.info("Added task #%d: %s", size, task)
    return f"Got it. I've added this task:\n  {task}\nNow you have {size} task(s) in the list."


def _done(cmd: DoneCommand, task_list: TaskList, storage: TaskStorage) -> str:
    task_list.check_task_num(cmd.task_num)
    storage.update_done_flag(cmd.task_num)
    task = task_list.mark_done(cmd.task_num)
    logger.info("Marked task #%d done", cmd.task_num)
    return f"Nice! I've marked this task as done:\n  {task}"


def _delete(cmd: DeleteCommand, task_list: TaskList, storage: TaskStorage) -> str:
    task_list.check_task_num(cmd.task_num)
    storage.delete_line(cmd.task_num)
    task = task_list.delete(cmd.task_num)
    logger.info("Deleted task #%d: %s", cmd.task_num, task)
    return (
        f"Noted. I've removed this task:\n  {task}\n"
        f"Now you have {len(task_list)} task(s) in the list."
    )


def _find(cmd: FindCommand, task_list: TaskList) -> str:
    found = task_list.find(cmd.keyword)
    if not found:
        return f'No matching tasks found for "{cmd.keyword}".'
    return "\n".join(["Here are the matching tasks in your list:", *_numbered(found)])


def _list(task_list: TaskList) -> str:
    if not len(task_list):
        return EMPTY_LIST_MESSAGE
    return "\n".join(_numbered(list(task_list)))


def execute_command(command: Command, task_list: TaskList, storage: TaskStorage) -> str:
    """Run a command against the list and its storage; returns the reply text."""
    match command:
        case AddCommand():
            return _add(command, task_list, storage)
        case DoneCommand():
            return _done(command, task_list, storage)
        case DeleteCommand():
            return _delete(command, task_list, storage)
        case FindCommand():
            return _find(command, task_list)
        case ListCommand():
            return _list(task_list)
        case HelpCommand(text=text):
            return text
        case ExitCommand():
            return EXIT_MESSAGE
    raise TypeError(f"unsupported command: {command!r}")
