# src/everyframe/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The recurrence engine depends on these Protocols instead of the concrete
TaskStore, so hosts and tests can hand it any ordered task collection.
"""

from collections.abc import Callable
from datetime import date
from typing import Protocol

from ..tasks.task_models import Task

Clock = Callable[[], date]
# Returns the host's idea of "today" (local calendar date).


class TaskRepo(Protocol):
    def iter_tasks(self) -> list[tuple[int, Task]]: ...
