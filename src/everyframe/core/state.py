# src/everyframe/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (real Settings or a test double with the same attributes).
    settings: object

    store: TaskStore

    # "daily?" toggle: period used for tasks added without an explicit -d/-w.
    daily: bool = False

    # Date of the current refresh tick; new tasks are seeded from it.
    # None outside a tick (the store then uses the local date).
    today: date | None = None
