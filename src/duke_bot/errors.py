# src/duke_bot/errors.py

"""
User-facing errors.

Every error carries an ErrorKind so callers that only see a Reply can still
branch on what went wrong. `message` is the text shown to the user.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    EMPTY_DESCRIPTION = "empty_description"
    INVALID_COMMAND = "invalid_command"
    IO_FAILURE = "io_failure"
    INDEX_OUT_OF_RANGE = "index_out_of_range"


class DukeError(Exception):
    kind: ClassVar[ErrorKind]

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyDescriptionError(DukeError):
    """A command keyword was recognized but its argument is missing or malformed."""

    kind = ErrorKind.EMPTY_DESCRIPTION

    def __init__(self, keyword: str, detail: str | None = None) -> None:
        self.keyword = keyword
        if detail is None:
            detail = f"The description of a {keyword} cannot be empty."
        super().__init__(f"OOPS!!! {detail}")


class InvalidCommandError(DukeError):
    kind = ErrorKind.INVALID_COMMAND

    def __init__(self, detail: str | None = None) -> None:
        if detail is None:
            detail = "I'm sorry, but I don't know what that means :-("
        super().__init__(f"OOPS!!! {detail}")


class StorageError(DukeError):
    kind = ErrorKind.IO_FAILURE

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"OOPS!!! Could not access the task file: {detail}")


class TaskIndexError(DukeError):
    kind = ErrorKind.INDEX_OUT_OF_RANGE

    def __init__(self, task_num: int, size: int) -> None:
        self.task_num = task_num
        self.size = size
        super().__init__(
            f"OOPS!!! Task {task_num} does not exist. You have {size} task(s) in the list."
        )
