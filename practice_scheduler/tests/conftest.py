import os
import sys
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

import practice_scheduler.main as main
from practice_scheduler.config import clear_settings_cache
from practice_scheduler.db import Database
from practice_scheduler.dependencies import get_database, get_optional_database


@pytest.fixture
def fake_database():
    database = MagicMock(spec=Database)
    database.is_open = True
    database.ping = AsyncMock(return_value=True)
    return database


@pytest.fixture
def app(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    clear_settings_cache()
    application = main.create_app()
    yield application
    application.dependency_overrides.clear()
    clear_settings_cache()


@pytest.fixture
def client(app, fake_database):
    app.dependency_overrides[get_database] = lambda: fake_database
    app.dependency_overrides[get_optional_database] = lambda: fake_database

    with TestClient(app) as c:
        yield c


@pytest.fixture
def unconfigured_client(app):
    with TestClient(app) as c:
        yield c
