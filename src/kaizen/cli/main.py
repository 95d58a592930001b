# src/kaizen/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (seeded task store), then runs the
console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.task_models import TaskError

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, app_name=settings.app_name, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except (OSError, TaskError) as e:
        logger.error("Could not load seed tasks: %s", e)
        return 1

    if settings.console_enabled:
        run_console_loop(state)
    else:
        logger.info("Console disabled; nothing to run (tasks=%s).", state.task_store.count_tasks())

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
