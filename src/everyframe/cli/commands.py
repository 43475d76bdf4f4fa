# src/everyframe/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.render import format_board
from ..core.state import AppState

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    try:
        task_id = int(args[0])
    except ValueError:
        return None
    return task_id if task_id >= 0 else None


def add_task(state: AppState, name: str, *, daily: bool | None = None) -> str:
    name = name.strip()
    if not name:
        return "Task name is empty."
    is_daily = state.daily if daily is None else daily
    task_id = state.store.insert(name, is_daily, today=state.today)
    kind = "daily" if is_daily else "weekly"
    logger.info("Added %s task id=%s", kind, task_id)
    return f"Added {kind} task {task_id}: {name}"


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <name>       -> uses the current "daily?" toggle
    /add -d <name>    -> daily
    /add -w <name>    -> weekly
    """
    daily: bool | None = None
    if args and args[0] in ("-d", "--daily"):
        daily, args = True, args[1:]
    elif args and args[0] in ("-w", "--weekly"):
        daily, args = False, args[1:]

    if not args:
        return "Usage: /add [-d|-w] <name>"
    return add_task(state, " ".join(args), daily=daily)


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    done = state.store.toggle_done(task_id)
    if done is None:
        return f"No task with id {task_id}."
    return f"Task {task_id} marked {'done' if done else 'not done'}."


def cmd_rm(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rm <id>"
    if not state.store.remove(task_id):
        return f"No task with id {task_id}."
    logger.info("Removed task id=%s", task_id)
    return f"Removed task {task_id}."


def cmd_list(state: AppState, args: list[str]) -> str:
    return format_board(state.store)


def cmd_daily(state: AppState, args: list[str]) -> str:
    """
    /daily        -> show the toggle
    /daily on     -> new tasks are daily
    /daily off    -> new tasks are weekly
    """
    if not args:
        return f"New tasks are {'daily' if state.daily else 'weekly'}. Use /daily on or /daily off."

    arg = args[0].lower()
    if arg in ("on", "1", "true", "yes"):
        state.daily = True
        return "New tasks will be daily."
    if arg in ("off", "0", "false", "no"):
        state.daily = False
        return "New tasks will be weekly."
    return "Usage: /daily on or /daily off."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add [-d|-w] <name>.")
registry.register("done", cmd_done, help_text="Toggle done: /done <id>.", aliases=["toggle"])
registry.register("rm", cmd_rm, help_text="Remove a task: /rm <id>.", aliases=["remove"])
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("daily", cmd_daily, help_text="Default period for new tasks: /daily on | /daily off.")
