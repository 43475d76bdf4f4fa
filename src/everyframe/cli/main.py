# src/everyframe/cli/main.py

"""
CLI entrypoint.

Initializes logging, restores AppState from its snapshot, runs the console
loop in the main thread and saves the snapshot on the way out.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, save_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    if not getattr(state.settings, "save_on_exit", True):
        logger.info("save_on_exit is off; snapshot not written.")
        return
    try:
        save_state(state)
    except Exception:
        logger.exception("Failed to save state.")


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/everyframe")
    app_name = str(getattr(settings, "app_name", "everyframe"))
    log_file = setup_logging(app_name=app_name, log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (log file %s)...", app_name, log_file)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
