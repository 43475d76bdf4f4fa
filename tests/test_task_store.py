# tests/test_task_store.py

from __future__ import annotations

from datetime import date

from everyframe.tasks.task_models import Period, PeriodKind
from everyframe.tasks.task_store import TaskStore

DAY = date(2026, 3, 5)  # day-of-month 5, ISO week 10


def test_insert_seeds_marker_from_today(store: TaskStore) -> None:
    daily_id = store.insert("stretch", True, today=DAY)
    weekly_id = store.insert("laundry", False, today=DAY)

    daily = store.get(daily_id)
    weekly = store.get(weekly_id)
    assert daily is not None and weekly is not None

    assert daily.done is False
    assert daily.period == Period(PeriodKind.DAILY, 5)
    assert weekly.done is False
    assert weekly.period == Period(PeriodKind.WEEKLY, DAY.isocalendar().week)
    assert weekly.period.marker == 10


def test_ids_are_monotonic_and_never_reused(store: TaskStore) -> None:
    a = store.insert("a", True, today=DAY)
    b = store.insert("b", True, today=DAY)
    assert (a, b) == (0, 1)

    store.remove(b)
    store.remove(a)
    c = store.insert("c", False, today=DAY)

    assert c == 2
    assert store.next_id == 3
    assert [task_id for task_id, _ in store.iter_tasks()] == [2]


def test_iteration_is_ascending_and_restartable(store: TaskStore) -> None:
    for name in ("one", "two", "three"):
        store.insert(name, True, today=DAY)
    store.remove(1)

    first = [(task_id, task.name) for task_id, task in store]
    second = [(task_id, task.name) for task_id, task in store.iter_tasks()]

    assert first == [(0, "one"), (2, "three")]
    assert first == second
    assert len(store) == 2


def test_toggle_done_flips_and_reports(store: TaskStore) -> None:
    task_id = store.insert("read", True, today=DAY)

    assert store.toggle_done(task_id) is True
    assert store.get(task_id).done is True
    assert store.toggle_done(task_id) is False
    assert store.get(task_id).done is False


def test_remove_and_missing_ids_are_noops(store: TaskStore) -> None:
    task_id = store.insert("read", True, today=DAY)
    keep_id = store.insert("write", True, today=DAY)

    assert store.remove(task_id) is True
    assert task_id not in store
    assert [i for i, _ in store] == [keep_id]

    assert store.toggle_done(task_id) is None
    assert store.remove(task_id) is False
    assert [i for i, _ in store] == [keep_id]
    assert store.get(keep_id).done is False


def test_insert_accepts_any_name(store: TaskStore) -> None:
    a = store.insert("", True, today=DAY)
    b = store.insert("", True, today=DAY)
    assert a != b
    assert store.get(a).name == ""


def test_insert_defaults_to_local_today(store: TaskStore) -> None:
    from everyframe.tasks.recurrence import today

    task_id = store.insert("now", True)
    assert store.get(task_id).period.marker == today().day
