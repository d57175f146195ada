# src/duke_bot/tasks/task_store.py

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import StorageError, TaskIndexError
from .task_models import DELIMITER, DONE_FLAG, NOT_DONE_FLAG, Task, decode_task

logger = logging.getLogger(__name__)


class TaskFileStore:
    """
    Flat-file task store: one encoded task per line, UTF-8.

    Line i of the file always corresponds to task i of the in-memory list.
    Mutations other than append are whole-file read-modify-write cycles; the
    rewrite goes through a temp file and os.replace so a failed write never
    leaves a half-written task file behind.

    Not safe for concurrent use by several processes.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    @staticmethod
    def _split_lines(raw: str) -> list[str]:
        # Only "\n" ends a record; str.splitlines() would also break on
        # characters such as \u2028 that may appear inside a description.
        lines = raw.split("\n")
        if lines[-1] == "":
            lines.pop()
        return [line.removesuffix("\r") for line in lines]

    def _read_raw(self) -> str:
        try:
            with open(self._path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"{self._path}: {exc}") from exc

    def _read_lines(self) -> list[str]:
        return self._split_lines(self._read_raw())

    def _write_lines(self, lines: list[str]) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                for line in lines:
                    f.write(line + "\n")
            os.replace(tmp, self._path)
        except OSError as exc:
            raise StorageError(f"{self._path}: {exc.strerror or exc}") from exc

    @staticmethod
    def _check_task_num(task_num: int, lines: list[str]) -> int:
        if task_num < 1 or task_num > len(lines):
            raise TaskIndexError(task_num, len(lines))
        return task_num - 1

    # ---- public API ----

    def load(self) -> list[Task]:
        """
        Read every task from the file.

        A missing file is created empty. Blank lines are dropped (and the file
        rewritten without them) so that line numbers keep matching task numbers.
        """
        if not self._path.exists():
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._path.touch()
            except OSError as exc:
                raise StorageError(f"{self._path}: {exc.strerror or exc}") from exc
            logger.info("Created empty task file %s", self._path)
            return []

        raw = self._read_raw()
        lines = self._split_lines(raw)
        kept: list[str] = []
        tasks: list[Task] = []
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                tasks.append(decode_task(line))
            except StorageError as exc:
                raise StorageError(f"{self._path} line {lineno}: {exc.detail}") from exc
            kept.append(line)

        if len(kept) != len(lines) or (raw and not raw.endswith("\n")):
            logger.info(
                "Normalizing task file %s (%d blank lines dropped)",
                self._path,
                len(lines) - len(kept),
            )
            self._write_lines(kept)

        logger.info("Loaded %d task(s) from %s", len(tasks), self._path)
        return tasks

    def append_line(self, encoded: str) -> None:
        try:
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(encoded + "\n")
        except OSError as exc:
            raise StorageError(f"{self._path}: {exc.strerror or exc}") from exc
        logger.debug("Appended line: %s", encoded)

    def update_done_flag(self, task_num: int, done: bool = True) -> None:
        """Rewrite only the done-flag field of line `task_num`; other bytes are kept."""
        lines = self._read_lines()
        idx = self._check_task_num(task_num, lines)

        fields = lines[idx].split(DELIMITER)
        if len(fields) < 3:
            raise StorageError(f"{self._path} line {task_num}: malformed record")
        flag = DONE_FLAG if done else NOT_DONE_FLAG
        fields[1] = f" {flag} "
        lines[idx] = DELIMITER.join(fields)

        self._write_lines(lines)
        logger.debug("Set done=%s on line %d", done, task_num)

    def delete_line(self, task_num: int) -> None:
        lines = self._read_lines()
        idx = self._check_task_num(task_num, lines)
        removed = lines.pop(idx)
        self._write_lines(lines)
        logger.debug("Deleted line %d: %s", task_num, removed)
