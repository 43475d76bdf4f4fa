# src/everyframe/tasks/snapshot.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """The snapshot file exists but cannot be read or decoded."""


def load_snapshot(path: str | Path) -> dict[str, Any] | None:
    """
    Read a JSON snapshot.

    Returns None if the file does not exist yet (first run).
    Raises SnapshotError if it exists but is unreadable or not a JSON object.
    """
    path = Path(path)
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text("utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SnapshotError(f"cannot read snapshot {path}: {e}") from e
    if not isinstance(data, dict):
        raise SnapshotError(f"snapshot {path} is not a JSON object")
    return data


def save_snapshot(path: str | Path, data: dict[str, Any]) -> None:
    """Write JSON via a temp file + os.replace so a crash never leaves half a file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".tmp")
    tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
    os.replace(tmp, path)
    with contextlib.suppress(Exception):
        os.chmod(path, 0o600)
    logger.debug("Snapshot written to %s", path)
