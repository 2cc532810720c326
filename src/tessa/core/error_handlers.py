"""
Centralized API error handlers.

Maps exceptions to the JSON error envelope
``{"status": "error", "code": ..., "message": ...}``. Outside production
the formatted traceback is added as ``stack``.
"""

import traceback
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import ApplicationException, DataInconsistencyException
from schemas.common import ErrorResponse

logger = logging.getLogger("API_ERRORS")


def _error_response(request: Request, status_code: int, message: str, exc: Exception) -> JSONResponse:
    body = ErrorResponse(code=status_code, message=message)

    settings = getattr(request.app.state, "settings", None)
    if settings is not None and not settings.is_production:
        body.stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    headers = {"WWW-Authenticate": "Basic"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def application_exception_handler(request: Request, exc: ApplicationException) -> JSONResponse:
    if isinstance(exc, DataInconsistencyException):
        logger.critical(f"{request.method} {request.url.path}: {exc.message} {exc.details}")
    elif exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message} {exc.details}")
    return _error_response(request, exc.status_code, exc.message, exc)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return _error_response(request, status.HTTP_400_BAD_REQUEST, "; ".join(messages), exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _error_response(request, exc.status_code, "Route Not found", exc)
    return _error_response(request, exc.status_code, str(exc.detail), exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", exc)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationException, application_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
