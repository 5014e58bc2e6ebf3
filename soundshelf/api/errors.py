"""
Soundshelf Exception Handlers
Framework-level errors rendered in the standard envelope
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .deps import error_response, get_api_version

logger = logging.getLogger(__name__)

_STATUS_MESSAGES = {
    status.HTTP_404_NOT_FOUND: "Not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = exc.detail if isinstance(exc.detail, str) else None
        # Starlette's default detail is the bare reason phrase
        if exc.status_code in _STATUS_MESSAGES and message in (None, "Not Found", "Method Not Allowed"):
            message = _STATUS_MESSAGES[exc.status_code]
        response = error_response(message or "Request failed", get_api_version(request), exc.status_code)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.debug(f"Validation error on {request.url.path}: {exc.errors()}")
        return error_response(
            "Invalid request parameters",
            get_api_version(request),
            status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return error_response(
            "Internal server error",
            get_api_version(request),
            status.HTTP_500_INTERNAL_SERVER_ERROR
        )
