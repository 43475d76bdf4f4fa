# src/everyframe/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import date
from typing import Any

from .recurrence import period_value
from .recurrence import today as local_today
from .task_models import Period, PeriodKind, Task

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class TaskStore:
    """
    In-memory ordered task store.

    Ids come from a counter that starts at 0 and only goes up, so insertion
    order and ascending id order are the same thing. Removed ids are never
    handed out again.

    Not thread-safe: the store is owned by the single host loop that drives it.
    """

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id = 0

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def __iter__(self) -> Iterator[tuple[int, Task]]:
        return iter(self.iter_tasks())

    # ---- public API ----

    def insert(self, name: str, is_daily: bool, *, today: date | None = None) -> int:
        """
        Add a new task and return its id.

        The period marker is seeded from `today` (local date by default),
        so a fresh task always starts out current with done=False.
        """
        if today is None:
            today = local_today()

        kind = PeriodKind.DAILY if is_daily else PeriodKind.WEEKLY
        task = Task(name=name, done=False, period=Period(kind, period_value(kind, today)))

        task_id = self._next_id
        self._tasks[task_id] = task
        self._next_id += 1
        logger.debug("Task added id=%s kind=%s marker=%s", task_id, kind.value, task.period.marker)
        return task_id

    def get(self, task_id: int) -> Task | None:
        return self._tasks.get(task_id)

    def remove(self, task_id: int) -> bool:
        task = self._tasks.pop(task_id, None)
        if task is None:
            return False
        logger.debug("Task removed id=%s", task_id)
        return True

    def toggle_done(self, task_id: int) -> bool | None:
        """Flip the done flag. Returns the new value, or None if the id is unknown."""
        task = self._tasks.get(task_id)
        if task is None:
            return None
        task.done = not task.done
        logger.debug("Task toggled id=%s done=%s", task_id, task.done)
        return task.done

    def iter_tasks(self) -> list[tuple[int, Task]]:
        return list(self._tasks.items())

    # ---- snapshot ----

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": SNAPSHOT_VERSION,
            "next_id": self._next_id,
            "tasks": {
                str(task_id): {
                    "name": task.name,
                    "done": task.done,
                    "period": {"kind": task.period.kind.value, "marker": task.period.marker},
                }
                for task_id, task in self._tasks.items()
            },
        }

    @classmethod
    def from_dict(cls, data: Any) -> TaskStore:
        """
        Rebuild a store from to_dict() output.

        Missing task fields fall back to Task defaults. Anything structurally
        wrong raises ValueError; the caller decides how to recover.
        """
        if not isinstance(data, dict):
            raise ValueError(f"snapshot must be an object, got {type(data).__name__}")

        version = data.get("version", SNAPSHOT_VERSION)
        if version != SNAPSHOT_VERSION:
            raise ValueError(f"unsupported snapshot version: {version!r}")

        raw_tasks = data.get("tasks", {})
        if not isinstance(raw_tasks, dict):
            raise ValueError("snapshot 'tasks' must be an object")

        loaded: dict[int, Task] = {}
        for raw_id, raw_task in raw_tasks.items():
            try:
                task_id = int(raw_id)
            except (TypeError, ValueError):
                raise ValueError(f"invalid task id: {raw_id!r}") from None
            if task_id < 0:
                raise ValueError(f"invalid task id: {raw_id!r}")
            loaded[task_id] = _task_from_dict(task_id, raw_task)

        try:
            next_id = int(data.get("next_id", 0))
        except (TypeError, ValueError):
            raise ValueError(f"invalid next_id: {data.get('next_id')!r}") from None

        if loaded and next_id <= max(loaded):
            fixed = max(loaded) + 1
            logger.warning("Snapshot next_id=%s is behind stored ids; using %s", next_id, fixed)
            next_id = fixed

        store = cls()
        store._tasks = dict(sorted(loaded.items()))
        store._next_id = max(0, next_id)
        return store


def _task_from_dict(task_id: int, raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise ValueError(f"task {task_id}: record must be an object")

    task = Task()
    if "name" in raw:
        task.name = str(raw["name"])
    if "done" in raw:
        if not isinstance(raw["done"], bool):
            raise ValueError(f"task {task_id}: done must be a boolean, got {raw['done']!r}")
        task.done = raw["done"]

    raw_period = raw.get("period")
    if raw_period is not None:
        if not isinstance(raw_period, dict):
            raise ValueError(f"task {task_id}: period must be an object")
        try:
            kind = PeriodKind(raw_period.get("kind", PeriodKind.DAILY.value))
        except ValueError:
            raise ValueError(f"task {task_id}: unknown period kind {raw_period.get('kind')!r}") from None
        try:
            marker = int(raw_period.get("marker", 1))
        except (TypeError, ValueError):
            raise ValueError(f"task {task_id}: invalid marker {raw_period.get('marker')!r}") from None
        if not 1 <= marker <= kind.max_marker:
            raise ValueError(f"task {task_id}: {kind.value} marker {marker} out of range 1-{kind.max_marker}")
        task.period = Period(kind, marker)

    return task
