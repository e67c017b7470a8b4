"""
Main entrypoint for the Kanban Board API.

This module assembles the FastAPI application: logging is set up,
domain errors are mapped onto the response envelope and the v1 router
is mounted under ``settings.api_prefix``.  The app is instantiated at
import time as ``app`` so it can be served with::

    uvicorn kanban_board_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.responses import envelope
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.errors import KanbanError, StoreFailure
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def kanban_error_handler(request: Request, exc: KanbanError) -> JSONResponse:
    if isinstance(exc, StoreFailure):
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc.message)
    return envelope(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies are the caller's fault, reported like other validation errors.
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return envelope(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_exception_handler(KanbanError, kanban_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file on first start and applies migrations.
        init_db()

    return app


app = create_app()
