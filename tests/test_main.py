# tests/test_main.py

from __future__ import annotations

import json
import logging

import pytest

import everyframe.cli.main as cli_main
from everyframe.logging_setup import log_file_name, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging_writes_file(tmp_path, restore_root_logging) -> None:
    log_file = setup_logging(app_name="everyframe", log_dir=tmp_path / "logs", console_level=logging.WARNING)
    logging.getLogger("everyframe.test").debug("hello %s", "file")

    for h in logging.getLogger().handlers:
        h.flush()
    assert log_file == tmp_path / "logs" / "everyframe.log"
    assert "hello file" in log_file.read_text("utf-8")


def test_log_file_name_follows_app_name() -> None:
    assert log_file_name("everyframe") == "everyframe.log"
    assert log_file_name("My Tasks") == "my-tasks.log"
    assert log_file_name("  ../ ") == "everyframe.log"


def test_main_saves_snapshot_on_exit(settings, monkeypatch, restore_root_logging) -> None:
    def fake_loop(state) -> None:
        state.store.insert("floss", True)
        raise KeyboardInterrupt

    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "run_console_loop", fake_loop)

    with pytest.raises(KeyboardInterrupt):
        cli_main.main()

    data = json.loads(settings.snapshot_path.read_text("utf-8"))
    assert data["next_id"] == 1
    assert data["tasks"]["0"]["name"] == "floss"
    assert (settings.data_dir / "everyframe-test.log").exists()


def test_main_respects_save_on_exit(settings, monkeypatch, restore_root_logging) -> None:
    settings.save_on_exit = False
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "run_console_loop", lambda state: None)

    cli_main.main()

    assert not settings.snapshot_path.exists()
