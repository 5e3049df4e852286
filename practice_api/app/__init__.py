"""
Application package initializer.

The API is split into a handful of small pieces: ``core`` holds
configuration, logging, the error taxonomy and the entity store;
``schemas`` holds the pydantic payload models; ``services`` holds the
per‑collection business logic; and ``api`` holds the FastAPI routers.
"""

from .main import app  # noqa: F401
