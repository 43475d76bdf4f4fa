# src/everyframe/logging_setup.py

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path

_PACKAGE = __name__.partition(".")[0]


class _ConsoleNoiseFilter(logging.Filter):
    """
    The console shares the terminal with the task board:
    - our own records pass (the handler level decides how many)
    - everything else, captured warnings included, only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == _PACKAGE or name.startswith(_PACKAGE + "."):
            return True
        return record.levelno >= logging.ERROR


def log_file_name(app_name: str) -> str:
    """'My Tasks' -> 'my-tasks.log'. Falls back to the package name."""
    stem = re.sub(r"[^a-z0-9._-]+", "-", app_name.strip().lower()).strip("-.")
    return f"{stem or _PACKAGE}.log"


def setup_logging(
    *,
    app_name: str = _PACKAGE,
    log_dir: str | Path = ".local/everyframe",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Console: short lines, filtered, so the board stays readable.
    File (<log_dir>/<app_name>.log): everything with timestamps.

    Call this ONCE, very early. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / log_file_name(app_name)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
