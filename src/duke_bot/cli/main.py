# src/duke_bot/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState from the task file, then runs the
console connector until `bye` or end of input.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..errors import StorageError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_dir = getattr(settings, "log_dir", ".local/duke")
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "duke"))

    try:
        state = create_initial_state(settings=settings)
    except StorageError as e:
        logger.error("Unable to load tasks: %s", e.message)
        print(e.message, file=sys.stderr)
        sys.exit(1)

    run_console_loop(state)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
