"""
Main entrypoint for the Geo User API.

This module assembles the FastAPI application: it sets up logging,
registers the error handlers that render the error taxonomy as JSON
and includes the API router.  ``create_app`` builds the app, which is
instantiated at import time as ``app`` so it can be served with::

    uvicorn geo_user_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.errors import ApiError, Unauthorized, ValidationError
from .core.logging_config import setup_logging


logger = logging.getLogger(__name__)

_LOCATION_ROOTS = {"body", "query", "path", "header", "cookie"}


def _field_name(loc: tuple) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _LOCATION_ROOTS and len(parts) > 1:
        parts = parts[1:]
    return ".".join(parts) or "body"


def _itemize(errors: List[Dict[str, Any]]) -> Dict[str, List[str]]:
    itemized: Dict[str, List[str]] = {}
    for error in errors:
        itemized.setdefault(_field_name(tuple(error.get("loc", ()))), []).append(error.get("msg", "Invalid value"))
    return itemized


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    body: Dict[str, Any] = {"status_code": exc.status_code, "message": exc.message}
    headers = None
    if isinstance(exc, ValidationError):
        body["errors"] = exc.errors
    elif isinstance(exc, Unauthorized):
        headers = {"WWW-Authenticate": "Bearer"}
    else:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=body, headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=ValidationError.status_code,
        content={
            "status_code": ValidationError.status_code,
            "message": ValidationError.default_message,
            "errors": _itemize(exc.errors()),
        },
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Creates the database file on first run and applies migrations.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_app()
