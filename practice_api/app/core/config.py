"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server starts without any configuration at all.  Values are read when
a ``Settings`` instance is created, which lets tests build their own
instance with explicit overrides instead of patching the environment.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


STORAGE_BACKENDS = ("memory", "sqlite")
ID_STRATEGIES = ("uuid", "sequence")


def _env(name: str, default: str) -> str:
    """Return an environment variable, treating an empty value as unset."""
    value = os.getenv(name)
    return value if value else default


def _env_port(name: str = "PORT", default: int = 3000) -> int:
    raw = _env(name, str(default))
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"{name} must be between 1 and 65535, got {port}")
    return port


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Practice CRUD API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Network binding used by ``run.py``.
    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=_env_port)

    # Comma‑separated list of allowed origins.  The default ``*`` lets the
    # dashboard talk to the API from any dev server.
    cors_origins: str = field(default_factory=lambda: _env("CORS_ORIGINS", "*"))

    # ``memory`` keeps entities in process; ``sqlite`` persists them in the
    # file named by ``database_url``.  A relative path is resolved against
    # the project root by the ``db`` module.
    storage_backend: str = field(default_factory=lambda: _env("STORAGE_BACKEND", "memory").lower())
    database_url: str = field(default_factory=lambda: _env("DATABASE_URL", "practice.db"))

    # How the store assigns identifiers: ``uuid`` tokens or a per‑collection
    # ``sequence`` counter.
    id_strategy: str = field(default_factory=lambda: _env("ID_STRATEGY", "uuid").lower())

    def __post_init__(self) -> None:
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Unknown storage backend {self.storage_backend!r}; expected one of {STORAGE_BACKENDS}"
            )
        if self.id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unknown id strategy {self.id_strategy!r}; expected one of {ID_STRATEGIES}"
            )

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
