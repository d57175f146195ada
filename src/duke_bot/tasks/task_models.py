# src/duke_bot/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..errors import InvalidCommandError, StorageError

FIELD_SEP = " | "
DELIMITER = "|"
LINE_BREAKS = ("\n", "\r")

DONE_FLAG = "1"
NOT_DONE_FLAG = "0"


class TaskKind(StrEnum):
    """Task variant; the value is the single-letter code stored on disk."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def time_label(self) -> str | None:
        if self is TaskKind.DEADLINE:
            return "by"
        if self is TaskKind.EVENT:
            return "at"
        return None


@dataclass(slots=True)
class Task:
    """
    A single to-do item.

    `when` holds the deadline ("by") of a DEADLINE or the time ("at") of an
    EVENT. It is free text and must be None for a TODO.
    """

    kind: TaskKind
    description: str
    done: bool = False
    when: str | None = None

    def __post_init__(self) -> None:
        self.description = (self.description or "").strip()
        if not self.description:
            raise ValueError("description is required")
        if DELIMITER in self.description:
            raise InvalidCommandError(f"Task descriptions cannot contain '{DELIMITER}'.")
        if any(ch in self.description for ch in LINE_BREAKS):
            raise InvalidCommandError("Task descriptions must fit on one line.")

        if self.kind is TaskKind.TODO:
            if self.when is not None:
                raise ValueError("a todo has no time field")
            return

        self.when = (self.when or "").strip()
        if not self.when:
            raise ValueError(f"{self.kind.name.lower()} requires a time")
        if DELIMITER in self.when:
            raise InvalidCommandError(f"Task times cannot contain '{DELIMITER}'.")
        if any(ch in self.when for ch in LINE_BREAKS):
            raise InvalidCommandError("Task times must fit on one line.")

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def mark_done(self) -> None:
        self.done = True

    def describe(self) -> str:
        text = f"[{self.kind.value}][{self.status_icon}] {self.description}"
        label = self.kind.time_label
        if label is not None:
            text += f" ({label}: {self.when})"
        return text

    def __str__(self) -> str:
        return self.describe()


def encode_task(task: Task) -> str:
    """Encode a task as one storage line (without the trailing newline)."""
    fields = [task.kind.value, DONE_FLAG if task.done else NOT_DONE_FLAG, task.description]
    if task.when is not None:
        fields.append(task.when)
    return FIELD_SEP.join(fields)


def decode_task(line: str) -> Task:
    """
    Decode one storage line.

    Fields are split on the bare delimiter and trimmed, so hand-edited lines
    with irregular spacing still load.
    """
    fields = [f.strip() for f in line.rstrip("\r\n").split(DELIMITER)]

    try:
        kind = TaskKind(fields[0])
    except ValueError:
        raise StorageError(f"unknown task type {fields[0]!r}") from None

    expected = 3 if kind is TaskKind.TODO else 4
    if len(fields) != expected:
        raise StorageError(
            f"expected {expected} fields for type {kind.value}, got {len(fields)}"
        )

    flag = fields[1]
    if flag not in (DONE_FLAG, NOT_DONE_FLAG):
        raise StorageError(f"invalid done flag {flag!r}")

    try:
        return Task(
            kind=kind,
            description=fields[2],
            done=flag == DONE_FLAG,
            when=fields[3] if expected == 4 else None,
        )
    except ValueError as exc:
        raise StorageError(str(exc)) from exc
