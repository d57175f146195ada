# src/duke_bot/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..core.chat import handle_line
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = ">>> "


def _is_tty(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except Exception:
        return False


def run_console_loop(
    state: AppState,
    input_stream: TextIO | None = None,
    output: TextIO | None = None,
) -> None:
    """
    Read commands line by line from `input_stream` and write replies to `output`.

    Stops on an exit command, end of input, or Ctrl+C. The prompt is only
    written when the input is an interactive terminal.
    """
    input_stream = input_stream if input_stream is not None else sys.stdin
    output = output if output is not None else sys.stdout
    interactive = _is_tty(input_stream)

    logger.info("Console connector started (interactive=%s).", interactive)
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "duke"))
    print(f"[{app_name}] Type a command. Use help for usage, bye to quit.", file=output)

    while True:
        if interactive:
            output.write(PROMPT)
            output.flush()
        try:
            raw = input_stream.readline()
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print(file=output)
            break

        if raw == "":
            logger.info("Console EOF received, exiting.")
            break

        user_input = raw.strip()
        if not user_input:
            continue

        try:
            reply = handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            print("Internal error while handling a command.", file=output)
            continue

        print(reply.text, file=output, flush=True)
        if reply.is_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
