"""Pytest fixtures for the construction dashboard API."""
from __future__ import annotations

from datetime import date, datetime, timezone

import pytest
from fastapi.testclient import TestClient

from construction_dashboard_api.app.core.config import DEFAULT_SEED_DIR, Settings
from construction_dashboard_api.app.core.store import EntityStore
from construction_dashboard_api.app.main import create_app
from construction_dashboard_api.app.schemas.task import TaskRead
from construction_dashboard_api.app.services.registry import build_services


FIXED_NOW = datetime(2024, 10, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def store() -> EntityStore:
    # Fresh copy of the bundled fixtures for every test.
    return EntityStore.from_seed_dir(DEFAULT_SEED_DIR)


@pytest.fixture()
def services(store: EntityStore):
    return build_services(store, latency_scale=0, clock=lambda: FIXED_NOW)


@pytest.fixture()
def client(store: EntityStore):
    app = create_app(store=store, settings=Settings(simulated_latency_scale=0))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_task():
    """Factory for ``TaskRead`` records with sensible defaults."""
    counter = {"next": 1}

    def _make(**overrides) -> TaskRead:
        values = {
            "id": counter["next"],
            "project_id": 1,
            "phase_id": 1,
            "phase_name": "Foundation",
            "name": f"Task {counter['next']}",
            "description": None,
            "due_date": date(2024, 10, 15),
            "priority": "Medium",
            "status": "Not Started",
            "assignee_id": 1,
            "assignee_name": "John Martinez",
            "created_at": FIXED_NOW,
        }
        values.update(overrides)
        counter["next"] += 1
        return TaskRead(**values)

    return _make
