"""Shared fixtures for the habit tracker tests."""

from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from habit_tracker.core.dependencies import habit_repository
from habit_tracker.services.habits import reminders, service
from habit_tracker.services.habits.repository import HabitRepository
from habit_tracker.services.scheduler import stop_scheduler
from main import app

FIXED_NOW = datetime(2026, 10, 17, 12, 0, 0)


@pytest.fixture
def repository() -> HabitRepository:
    return HabitRepository()


@pytest.fixture
def client():
    # No context manager: the lifespan (and its scheduler) stays off.
    habit_repository.clear()
    yield TestClient(app)
    habit_repository.clear()


@pytest.fixture
def fixed_now(monkeypatch) -> datetime:
    """Pin the service clock to FIXED_NOW."""
    today = FIXED_NOW.strftime("%Y-%m-%d")
    monkeypatch.setattr(service, "get_local_now", lambda: FIXED_NOW)
    monkeypatch.setattr(service, "get_local_today_str", lambda: today)
    monkeypatch.setattr(reminders, "get_local_today_str", lambda: today)
    return FIXED_NOW


@pytest.fixture
def clean_scheduler():
    stop_scheduler()
    yield
    stop_scheduler()
