# src/everyframe/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import add_task
from ..cli.commands import registry as command_registry
from ..core.ports import Clock
from ..core.render import format_board
from ..core.state import AppState
from ..tasks.recurrence import refresh, today

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str, *, clock: Clock = today) -> str:
    """
    One refresh tick: roll tasks over, apply the user's input, render.

    Plain text adds a task with the current "daily?" toggle;
    lines starting with "/" are slash commands.
    """
    now = clock()
    state.today = now
    refresh(state.store, now)

    line = line.strip()
    if not line:
        return format_board(state.store)

    try:
        reply = command_registry.handle(state, line)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if reply is None:
        reply = add_task(state, line)

    if line.split()[0].lower() in ("/list", "/ls"):
        return reply
    return f"{reply}\n{format_board(state.store)}"


def run_console_loop(
    state: AppState,
    *,
    clock: Clock = today,
    read: Callable[[str], str] = input,
) -> None:
    logger.info("Console connector started (%d task(s)).", len(state.store))
    _print_ts("[CONSOLE] Type a task name to add it. Use /help for commands. Use /exit to quit.\n")

    print(handle_line(state, "", clock=clock))

    while True:
        try:
            user_input = read(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        print(handle_line(state, user_input, clock=clock))

    logger.info("Console connector finished.")
