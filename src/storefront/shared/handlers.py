"""Translate domain errors into HTTP responses.

Error bodies have the shape ``{"error": <type>, "message": <text>}``;
validation failures add the per-field ``errors`` mapping.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError, ValidationError
from protean.integrations.fastapi import register_exception_handlers

from storefront.shared.errors import Conflict, InternalError, StorefrontError

logger = structlog.get_logger(__name__)


async def _storefront_error(request: Request, exc: StorefrontError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, error=exc.error_type, message=exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error_type, "message": exc.message},
    )


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "ValidationError", "message": "Invalid input", "errors": exc.messages},
    )


async def _version_conflict(request: Request, exc: ExpectedVersionError) -> JSONResponse:
    logger.warning("version_conflict", path=request.url.path, detail=str(exc))
    error = Conflict()
    return JSONResponse(
        status_code=error.status_code,
        content={"error": error.error_type, "message": error.message},
    )


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = {}
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        errors.setdefault(location or "body", []).append(error.get("msg", "Invalid value"))
    return JSONResponse(
        status_code=400,
        content={"error": "ValidationError", "message": "Invalid input", "errors": errors},
    )


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", path=request.url.path)
    error = InternalError()
    return JSONResponse(
        status_code=error.status_code,
        content={"error": error.error_type, "message": error.message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install protean's handlers, then the storefront's on top of them."""
    register_exception_handlers(app)

    app.add_exception_handler(StorefrontError, _storefront_error)
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(ExpectedVersionError, _version_conflict)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(Exception, _unexpected_error)
