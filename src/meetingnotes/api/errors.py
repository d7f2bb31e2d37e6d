"""Exception handlers that turn every failure into a JSON {"message": ...} payload."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from meetingnotes.errors import MeetingNotesError

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: MeetingNotesError) -> JSONResponse:
    """Map domain errors to their status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse({"message": exc.message}, status_code=exc.status_code)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Schema failures answer 400 with the individual validation errors."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    logger.info(f"{request.method} {request.url.path} invalid: {errors}")
    return JSONResponse(
        {"message": "Invalid data provided", "errors": errors},
        status_code=400,
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (404, 405) in the same payload shape."""
    return JSONResponse(
        {"message": str(exc.detail)},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else is an internal error; details stay in the log."""
    logger.exception(f"Unexpected error handling {request.method} {request.url.path}")
    return JSONResponse({"message": "Internal server error"}, status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    """Install all error handlers on the application."""
    app.add_exception_handler(MeetingNotesError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
