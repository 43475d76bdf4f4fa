# src/everyframe/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- restores the task store from its snapshot (or starts empty),
- writes the snapshot back at shutdown.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.snapshot import SnapshotError, load_snapshot, save_snapshot
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.snapshot_path.parent.mkdir(parents=True, exist_ok=True)


def load_state_store(settings) -> tuple[TaskStore, bool]:
    """
    Restore (store, daily toggle) from settings.snapshot_path.

    A missing, unreadable or incompatible snapshot yields an empty store and
    the configured default toggle. The broken file is left in place.
    """
    default_daily = bool(getattr(settings, "default_daily", False))
    path = settings.snapshot_path

    try:
        data = load_snapshot(path)
    except SnapshotError:
        logger.exception("Failed to load snapshot from %s; starting empty", path)
        return TaskStore(), default_daily

    if data is None:
        logger.info("No snapshot at %s; starting empty", path)
        return TaskStore(), default_daily

    try:
        store = TaskStore.from_dict(data)
    except ValueError:
        logger.exception("Incompatible snapshot at %s; starting empty", path)
        return TaskStore(), default_daily

    daily = data.get("daily", default_daily)
    logger.info("Loaded %d task(s) from %s (next_id=%s)", len(store), path, store.next_id)
    return store, bool(daily)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store, daily = load_state_store(settings)
    return AppState(settings=settings, store=store, daily=daily)


def save_state(state: AppState) -> None:
    path = state.settings.snapshot_path  # type: ignore[attr-defined]
    data = state.store.to_dict()
    data["daily"] = state.daily
    try:
        save_snapshot(path, data)
        logger.info("Saved %d task(s) to %s", len(state.store), path)
    except Exception:
        logger.exception("Failed to save snapshot to %s", path)
