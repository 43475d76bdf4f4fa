# src/everyframe/tasks/recurrence.py

from __future__ import annotations

"""
Recurrence engine.

Called once per refresh tick by the host, before rendering:
- computes the current period value for each task's kind,
- resets `done` and advances the marker for tasks whose marker is behind.

Markers are compared as plain integers (day-of-month, ISO week). The
comparison is strict, so repeated ticks within one period change nothing and
an older `now` never changes anything either. Month and year boundaries are
not detected (day 31 -> day 1, week 52 -> week 1): the marker is already
"ahead" of the new value and the task keeps its done flag.
"""

import logging
from datetime import date, datetime

from ..core.ports import TaskRepo
from .task_models import PeriodKind, Task

logger = logging.getLogger(__name__)


def today() -> date:
    """Local wall-clock date."""
    return datetime.now().astimezone().date()


def period_value(kind: PeriodKind, now: date) -> int:
    if kind is PeriodKind.DAILY:
        return now.day
    return now.isocalendar().week


def is_stale(task: Task, now: date) -> bool:
    return task.period.marker < period_value(task.period.kind, now)


def roll_over(task: Task, now: date) -> bool:
    """
    Move a stale task into the current period.

    Returns True if the task was reset (done cleared, marker advanced).
    """
    current = period_value(task.period.kind, now)
    if task.period.marker >= current:
        return False
    task.done = False
    task.period = task.period.advance(current)
    return True


def refresh(store: TaskRepo, now: date) -> list[int]:
    """Apply roll_over to every task. Returns ids that were reset."""
    reset: list[int] = []
    for task_id, task in store.iter_tasks():
        if roll_over(task, now):
            reset.append(task_id)

    if reset:
        logger.info("Refresh now=%s reset %d task(s): %s", now.isoformat(), len(reset), reset)
    return reset
