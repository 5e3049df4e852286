"""Shared fixtures for the API and dashboard tests."""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from practice_api.app.core.config import Settings
from practice_api.app.main import create_app


@pytest.fixture
def settings() -> Settings:
    """In-memory settings with sequential ids."""
    return Settings(storage_backend="memory", id_strategy="sequence")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    # Server errors are rendered by the 500 handler; keep them as responses.
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def sqlite_settings(tmp_path: Path) -> Settings:
    return Settings(storage_backend="sqlite", database_url=str(tmp_path / "practice.db"))


@pytest.fixture
def sample_user() -> dict:
    return {"name": "Ada Lovelace", "email": "ada@example.com"}


@pytest.fixture
def sample_product() -> dict:
    return {"name": "Widget", "price": 9.99, "category": "Tools"}
