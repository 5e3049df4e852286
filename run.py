"""Entry point for the Practice CRUD API server.

Starts the FastAPI application with uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``3000``); see ``practice_api.app.core.config`` for the other
supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from practice_api.app.core.config import settings
from practice_api.app.core.logging_config import uvicorn_log_config
from practice_api.app.main import app


logger = logging.getLogger("practice_api.run")

PRACTICE_ENDPOINTS = [
    ("GET", "/api/status"),
    ("GET", "/api/users"),
    ("POST", "/api/users"),
    ("GET", "/api/products"),
    ("POST", "/api/products"),
]


def log_banner(port: int) -> None:
    """Log the listening address and the available endpoints."""
    logger.info("Server running on http://localhost:%s", port)
    logger.info("Practice endpoints:")
    for method, path in PRACTICE_ENDPOINTS:
        logger.info("  %-6s %s", method, path)


async def main() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=uvicorn_log_config(settings),
    )
    server = Server(config)
    log_banner(settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
