"""
Main entrypoint for the Practice CRUD API.

This module assembles the FastAPI application: logging, CORS, the
entity store, the error handlers and the ``/api`` router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn practice_api.app.main:app --reload

or through ``run.py``, which also honours ``HOST`` and ``PORT``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import ApiError, InternalError, NotFoundError, ValidationError
from .core.logging_config import setup_logging
from .core.store import build_store
from .schemas.common import describe_errors, error_body


logger = logging.getLogger(__name__)


def _envelope_response(error: ApiError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error_body(error.message))


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as an error envelope.

    * ``ApiError`` subclasses keep their own status and message.
    * Body parsing failures become a 400 ``ValidationError``.
    * Unknown routes, and unsupported methods on known routes, become a
      404 ``NotFoundError``.
    * Anything else is logged with its traceback and reported as a
      generic 500 ``InternalError``.
    """

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return _envelope_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _envelope_response(ValidationError(describe_errors(exc.errors())))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return _envelope_response(NotFoundError())
        return JSONResponse(status_code=exc.status_code, content=error_body(str(exc.detail)))


def register_error_boundary(app: FastAPI) -> None:
    """Turn any uncaught exception into the generic 500 envelope.

    This runs as an HTTP middleware so that it sits inside
    ``CORSMiddleware``: 500 responses carry the same CORS headers as
    every other response.  It must be registered before CORS.
    """

    @app.middleware("http")
    async def error_boundary(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
            )
            return _envelope_response(InternalError())


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module‑level settings
        read from the environment; tests pass their own instance.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance with its own store
        attached as ``app.state.store``.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that store setup can log.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = build_store(settings)

    register_error_boundary(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
