# tests/test_config.py
from __future__ import annotations

import logging

from construction_dashboard_api.app.core.config import DEFAULT_SEED_DIR, Settings, settings
from construction_dashboard_api.app.core.logging_config import setup_logging


def test_default_seed_dir_ships_fixtures():
    for name in ("projects.json", "tasks.json", "resources.json", "directory.json"):
        assert (DEFAULT_SEED_DIR / name).is_file()


def test_settings_types():
    assert isinstance(settings.simulated_latency_scale, float)
    assert isinstance(settings.notification_history, int)
    assert isinstance(settings.port, int)
    assert Settings(simulated_latency_scale=0).simulated_latency_scale == 0


def test_setup_logging_writes_to_file(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    previous_level = root.level
    logfile = tmp_path / "logs" / "dashboard.log"

    try:
        setup_logging("warning", str(logfile))
        assert root.level == logging.WARNING
        logging.getLogger("construction_dashboard_api.test").warning("Material %s low", 2)
    finally:
        for handler in root.handlers:
            handler.close()
        root.setLevel(previous_level)

    assert "[WARNING] construction_dashboard_api.test: Material 2 low" in logfile.read_text(encoding="utf-8")


def test_setup_logging_is_idempotent(monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])
    setup_logging("DEBUG")
    assert root.handlers == [existing]
