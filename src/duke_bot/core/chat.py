# src/duke_bot/core/chat.py

"""
One turn of the conversation: input line -> Reply.

This is the boundary between the raising core and the callers. A DukeError
becomes a Reply carrying the error kind; anything else is a bug and
propagates to the connector.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import DukeError, ErrorKind
from .commands import execute_command, is_exit
from .state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Reply:
    text: str
    is_exit: bool = False
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def handle_line(state: AppState, line: str) -> Reply:
    try:
        command = state.parser.parse(line)
        text = execute_command(command, state.task_list, state.storage)
    except DukeError as e:
        logger.info("Command failed (%s): %r", e.kind.value, line)
        return Reply(text=e.message, error=e.kind)

    return Reply(text=text, is_exit=is_exit(command))
