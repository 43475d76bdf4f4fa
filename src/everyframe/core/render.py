# src/everyframe/core/render.py

from __future__ import annotations

from ..tasks.task_models import PeriodKind, Task
from ..tasks.task_store import TaskStore


def format_row(task_id: int, task: Task) -> str:
    mark = "x" if task.done else " "
    return f"[{mark}] {task_id:<3} {task.label}"


def format_board(store: TaskStore) -> str:
    """Two sections, daily first, each in ascending id order."""
    sections: dict[PeriodKind, list[str]] = {PeriodKind.DAILY: [], PeriodKind.WEEKLY: []}
    for task_id, task in store.iter_tasks():
        sections[task.period.kind].append(format_row(task_id, task))

    lines: list[str] = []
    for kind, title in ((PeriodKind.DAILY, "Daily"), (PeriodKind.WEEKLY, "Weekly")):
        lines.append(f"{title}:")
        rows = sections[kind]
        if rows:
            lines.extend(f"  {row}" for row in rows)
        else:
            lines.append("  (none)")
    return "\n".join(lines)
