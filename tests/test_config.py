"""Tests for environment-driven settings."""

import pytest

from practice_api.app.core.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PORT", "HOST", "STORAGE_BACKEND", "ID_STRATEGY", "CORS_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings()
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.storage_backend == "memory"
    assert settings.id_strategy == "uuid"
    assert settings.cors_origin_list == ["*"]


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert Settings().port == 8080


def test_empty_port_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PORT", "")
    assert Settings().port == 3000


@pytest.mark.parametrize("value", ["abc", "3000.5", "0", "70000"])
def test_invalid_port_is_rejected(monkeypatch, value):
    monkeypatch.setenv("PORT", value)
    with pytest.raises(ValueError, match="PORT"):
        Settings()


def test_backend_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "SQLite")
    assert Settings().storage_backend == "sqlite"


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError, match="storage backend"):
        Settings(storage_backend="redis")


def test_unknown_id_strategy_is_rejected():
    with pytest.raises(ValueError, match="id strategy"):
        Settings(id_strategy="random")


def test_cors_origin_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
    assert Settings().cors_origin_list == ["http://a.test", "http://b.test"]
