# src/everyframe/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "EVERYFRAME"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    snapshot_path: Path

    # ---- Behaviour ----
    default_daily: bool
    save_on_exit: bool

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "everyframe").strip() or "everyframe"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/everyframe"))
        snapshot_path = _env_path(_k("SNAPSHOT_PATH"), data_dir / "tasks.json")

        default_daily = _env_bool(_k("DEFAULT_DAILY"), False)
        save_on_exit = _env_bool(_k("SAVE_ON_EXIT"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            snapshot_path=snapshot_path,
            default_daily=default_daily,
            save_on_exit=save_on_exit,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
