# tests/test_commands.py

from __future__ import annotations

from pathlib import Path

import pytest

from duke_bot.core.commands import (
    EMPTY_LIST_MESSAGE,
    EXIT_MESSAGE,
    AddCommand,
    DeleteCommand,
    DoneCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    execute_command,
    is_exit,
)
from duke_bot.errors import StorageError, TaskIndexError
from duke_bot.tasks.task_list import TaskList
from duke_bot.tasks.task_models import Task, TaskKind
from duke_bot.tasks.task_store import TaskFileStore


class FailingStorage:
    """TaskStorage whose writes always fail; used to check the list is left untouched."""

    def load(self) -> list[Task]:
        return []

    def append_line(self, encoded: str) -> None:
        raise StorageError("disk full")

    def update_done_flag(self, task_num: int, done: bool = True) -> None:
        raise StorageError("disk full")

    def delete_line(self, task_num: int) -> None:
        raise StorageError("disk full")


@pytest.fixture()
def store(tmp_path: Path) -> TaskFileStore:
    s = TaskFileStore(tmp_path / "tasks.txt")
    s.load()
    return s


def _lines(store: TaskFileStore) -> list[str]:
    return store.path.read_text("utf-8").splitlines()


def test_add_writes_through(store: TaskFileStore) -> None:
    tl = TaskList()

    reply = execute_command(AddCommand(TaskKind.TODO, "read book"), tl, store)
    assert "[T][ ] read book" in reply
    assert "1 task(s)" in reply

    reply = execute_command(
        AddCommand(TaskKind.DEADLINE, "submit report", "Friday 5pm"), tl, store
    )
    assert "[D][ ] submit report (by: Friday 5pm)" in reply
    assert "2 task(s)" in reply

    assert _lines(store) == ["T | 0 | read book", "D | 0 | submit report | Friday 5pm"]
    assert [t.description for t in tl] == ["read book", "submit report"]


def test_done_marks_list_and_file(store: TaskFileStore) -> None:
    tl = TaskList()
    execute_command(AddCommand(TaskKind.TODO, "a"), tl, store)
    execute_command(AddCommand(TaskKind.EVENT, "b", "Mon"), tl, store)

    reply = execute_command(DoneCommand(2), tl, store)
    assert "[E][X] b (at: Mon)" in reply
    assert _lines(store) == ["T | 0 | a", "E | 1 | b | Mon"]

    # second time: no error, same state
    execute_command(DoneCommand(2), tl, store)
    assert _lines(store) == ["T | 0 | a", "E | 1 | b | Mon"]
    assert tl.get(2).done and not tl.get(1).done


def test_delete_removes_from_list_and_file(store: TaskFileStore) -> None:
    tl = TaskList()
    for name in ("a", "b", "c"):
        execute_command(AddCommand(TaskKind.TODO, name), tl, store)

    reply = execute_command(DeleteCommand(2), tl, store)
    assert "[T][ ] b" in reply
    assert "2 task(s)" in reply
    assert [t.description for t in tl] == ["a", "c"]
    assert _lines(store) == ["T | 0 | a", "T | 0 | c"]


@pytest.mark.parametrize("command", [DoneCommand(0), DoneCommand(2), DeleteCommand(5)])
def test_out_of_range_changes_nothing(store: TaskFileStore, command) -> None:
    tl = TaskList()
    execute_command(AddCommand(TaskKind.TODO, "a"), tl, store)

    with pytest.raises(TaskIndexError):
        execute_command(command, tl, store)
    assert len(tl) == 1
    assert _lines(store) == ["T | 0 | a"]


def test_storage_failure_leaves_list_unchanged() -> None:
    tl = TaskList([Task(TaskKind.TODO, "a")])
    storage = FailingStorage()

    with pytest.raises(StorageError):
        execute_command(AddCommand(TaskKind.TODO, "b"), tl, storage)
    with pytest.raises(StorageError):
        execute_command(DoneCommand(1), tl, storage)
    with pytest.raises(StorageError):
        execute_command(DeleteCommand(1), tl, storage)

    assert [t.description for t in tl] == ["a"]
    assert tl.get(1).done is False


def test_find_renumbers_matches(store: TaskFileStore) -> None:
    tl = TaskList(
        [
            Task(TaskKind.TODO, "read book"),
            Task(TaskKind.TODO, "buy milk"),
            Task(TaskKind.DEADLINE, "return book", when="Sunday"),
        ]
    )
    reply = execute_command(FindCommand("book"), tl, store)
    assert reply.splitlines() == [
        "Here are the matching tasks in your list:",
        "1. [T][ ] read book",
        "2. [D][ ] return book (by: Sunday)",
    ]

    assert execute_command(FindCommand("Book"), tl, store) == 'No matching tasks found for "Book".'


def test_list(store: TaskFileStore) -> None:
    tl = TaskList()
    assert execute_command(ListCommand(), tl, store) == EMPTY_LIST_MESSAGE

    tl.add(Task(TaskKind.TODO, "a"))
    tl.add(Task(TaskKind.EVENT, "b", done=True, when="noon"))
    assert execute_command(ListCommand(), tl, store) == "1. [T][ ] a\n2. [E][X] b (at: noon)"


def test_exit(store: TaskFileStore) -> None:
    tl = TaskList()
    assert execute_command(ExitCommand(), tl, store) == EXIT_MESSAGE
    assert is_exit(ExitCommand())
    assert not is_exit(ListCommand())
