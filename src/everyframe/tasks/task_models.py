# src/everyframe/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum


class PeriodKind(StrEnum):
    """How often a task comes back. Fixed for the lifetime of a task."""

    DAILY = "daily"
    WEEKLY = "weekly"

    @property
    def suffix(self) -> str:
        return "[D]" if self is PeriodKind.DAILY else "[W]"

    @property
    def max_marker(self) -> int:
        # Largest day-of-month / ISO week number.
        return 31 if self is PeriodKind.DAILY else 53


@dataclass(slots=True, frozen=True)
class Period:
    """
    Recurrence tag plus the period marker.

    marker is the last day-of-month (daily) or ISO week (weekly)
    for which the task's done flag is known to be valid.
    """

    kind: PeriodKind
    marker: int

    @classmethod
    def daily(cls, marker: int) -> Period:
        return cls(PeriodKind.DAILY, int(marker))

    @classmethod
    def weekly(cls, marker: int) -> Period:
        return cls(PeriodKind.WEEKLY, int(marker))

    def advance(self, marker: int) -> Period:
        # Same kind, new marker.
        return replace(self, marker=int(marker))


@dataclass(slots=True)
class Task:
    name: str = "todo"
    done: bool = False
    period: Period = field(default_factory=lambda: Period.daily(1))

    @property
    def label(self) -> str:
        return f"{self.name} {self.period.kind.suffix}"
