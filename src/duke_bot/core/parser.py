# src/duke_bot/core/parser.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from ..errors import EmptyDescriptionError, InvalidCommandError
from ..tasks.task_models import TaskKind
from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    DoneCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
)

logger = logging.getLogger(__name__)

CommandBuilder = Callable[[str, str | None], Command]


class ParserMode(StrEnum):
    """
    ANCHORED: the first token of the line must be the keyword.
    LEGACY: the first registered keyword found anywhere in the line wins, and
    its argument starts at a fixed offset from where the keyword was found.
    """

    ANCHORED = "anchored"
    LEGACY = "legacy"

    @classmethod
    def from_config(cls, raw: str | None) -> ParserMode:
        if not raw:
            return cls.ANCHORED
        try:
            return cls(raw.strip().lower())
        except ValueError:
            logger.warning("Unknown parser mode %r, using %s.", raw, cls.ANCHORED.value)
            return cls.ANCHORED


@dataclass(frozen=True, slots=True)
class KeywordEntry:
    keyword: str
    builder: CommandBuilder
    usage: str


class KeywordRegistry:
    """
    Keyword -> command builder table. Registration order is match priority.

    Keywords are matched case-sensitively, like the exact commands.
    """

    def __init__(self) -> None:
        self._entries: dict[str, KeywordEntry] = {}

    def register(self, keyword: str, builder: CommandBuilder, usage: str) -> None:
        self._entries[keyword] = KeywordEntry(keyword, builder, usage)

    def get(self, keyword: str) -> KeywordEntry | None:
        return self._entries.get(keyword)

    def entries(self) -> list[KeywordEntry]:
        return list(self._entries.values())

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for entry in self._entries.values():
            lines.append(f"  {entry.usage}")
        lines.append("  list")
        lines.append("  help")
        lines.append("  bye")
        return "\n".join(lines)


# ---- argument builders ----


def _require(keyword: str, arg: str | None) -> str:
    text = (arg or "").strip()
    if not text:
        raise EmptyDescriptionError(keyword)
    return text


def _task_number(keyword: str, arg: str | None) -> int:
    text = _require(keyword, arg)
    try:
        return int(text)
    except ValueError:
        raise EmptyDescriptionError(
            keyword, f"'{keyword}' needs a task number, e.g. {keyword} 2."
        ) from None


def _split_timed(keyword: str, arg: str | None, marker: str) -> tuple[str, str]:
    text = _require(keyword, arg)
    description, sep, when = text.partition(marker)
    if not sep:
        raise EmptyDescriptionError(
            keyword, f"Use: {keyword} <description> {marker} <time>"
        )
    description = description.strip()
    when = when.strip()
    if not description:
        raise EmptyDescriptionError(keyword)
    if not when:
        raise EmptyDescriptionError(keyword, f"The time of a {keyword} cannot be empty.")
    return description, when


def build_done(keyword: str, arg: str | None) -> Command:
    return DoneCommand(_task_number(keyword, arg))


def build_todo(keyword: str, arg: str | None) -> Command:
    return AddCommand(TaskKind.TODO, _require(keyword, arg))


def build_deadline(keyword: str, arg: str | None) -> Command:
    description, when = _split_timed(keyword, arg, "/by")
    return AddCommand(TaskKind.DEADLINE, description, when)


def build_event(keyword: str, arg: str | None) -> Command:
    description, when = _split_timed(keyword, arg, "/at")
    return AddCommand(TaskKind.EVENT, description, when)


def build_delete(keyword: str, arg: str | None) -> Command:
    return DeleteCommand(_task_number(keyword, arg))


def build_find(keyword: str, arg: str | None) -> Command:
    return FindCommand(_require(keyword, arg))


def default_registry() -> KeywordRegistry:
    reg = KeywordRegistry()
    reg.register("done", build_done, "done <task number>")
    reg.register("todo", build_todo, "todo <description>")
    reg.register("deadline", build_deadline, "deadline <description> /by <time>")
    reg.register("event", build_event, "event <description> /at <time>")
    reg.register("delete", build_delete, "delete <task number>")
    reg.register("find", build_find, "find <keyword>")
    return reg


class CommandParser:
    """Turns one input line into a Command."""

    def __init__(
        self,
        mode: ParserMode | str = ParserMode.ANCHORED,
        registry: KeywordRegistry | None = None,
    ) -> None:
        self.mode = ParserMode.from_config(mode) if isinstance(mode, str) else mode
        self.registry = registry or default_registry()

    def parse(self, line: str) -> Command:
        if line == "bye":
            return ExitCommand()
        if line == "list":
            return ListCommand()
        if line == "help":
            return HelpCommand(self.registry.build_help())

        if self.mode is ParserMode.LEGACY:
            return self._parse_contained(line)
        return self._parse_anchored(line)

    def _parse_anchored(self, line: str) -> Command:
        parts = line.strip().split(maxsplit=1)
        if not parts:
            raise InvalidCommandError()

        entry = self.registry.get(parts[0])
        if entry is None:
            raise InvalidCommandError()

        arg = parts[1] if len(parts) > 1 else None
        return entry.builder(entry.keyword, arg)

    def _parse_contained(self, line: str) -> Command:
        for entry in self.registry.entries():
            pos = line.find(entry.keyword)
            if pos < 0:
                continue
            # argument starts one separator character after the keyword
            start = pos + len(entry.keyword) + 1
            arg = line[start:] if start <= len(line) else None
            logger.debug("Legacy match %r at %d in %r", entry.keyword, pos, line)
            return entry.builder(entry.keyword, arg)
        raise InvalidCommandError()
