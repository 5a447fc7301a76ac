"""
Global error handler middleware for the FastAPI application.
Catches and formats all exceptions consistently.
"""

import logging
import traceback
from typing import Any, Dict

from fastapi import status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from backoffice.config import settings
from backoffice.domain.models.base import (
    DomainException, ValidationError, EntityNotFoundError, SchemaMismatchError, StoreError,
    BusinessRuleViolation
)


logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        error_response = format_error_response(exc)

        if error_response["status_code"] >= 500:
            logger.error(
                f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
                exc_info=True,
                extra={
                    "request_path": request.url.path,
                    "request_method": request.method
                }
            )
        else:
            logger.info(f"{request.method} {request.url.path} failed: {str(exc)}")

        if settings.debug:
            error_response["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(
            status_code=error_response["status_code"],
            content=error_response
        )


def format_error_response(exc: Exception) -> Dict[str, Any]:
    """
    Format an exception into a consistent error response structure.
    Schema problems are reported separately from bad input.
    """
    error_response: Dict[str, Any] = {
        "error": "Internal Server Error",
        "message": "An unexpected error occurred",
        "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR
    }

    if isinstance(exc, ValidationError):
        error_response.update({
            "error": "Bad Request",
            "message": exc.message,
            "code": exc.code,
            "status_code": status.HTTP_400_BAD_REQUEST
        })
        if exc.field:
            error_response["field"] = exc.field
    elif isinstance(exc, EntityNotFoundError):
        error_response.update({
            "error": "Not Found",
            "message": exc.message,
            "code": exc.code,
            "status_code": status.HTTP_404_NOT_FOUND
        })
    elif isinstance(exc, SchemaMismatchError):
        error_response.update({
            "error": "Service Unavailable",
            "message": exc.message,
            "code": exc.code,
            "detail": exc.detail,
            "status_code": status.HTTP_503_SERVICE_UNAVAILABLE
        })
    elif isinstance(exc, StoreError):
        error_response.update({
            "error": "Bad Gateway",
            "message": exc.message,
            "code": exc.code,
            "status_code": status.HTTP_502_BAD_GATEWAY
        })
    elif isinstance(exc, BusinessRuleViolation):
        error_response.update({
            "error": "Conflict",
            "message": exc.message,
            "code": exc.code,
            "status_code": status.HTTP_409_CONFLICT
        })
    elif isinstance(exc, DomainException):
        error_response.update({
            "error": "Bad Request",
            "message": exc.message,
            "code": exc.code,
            "status_code": status.HTTP_400_BAD_REQUEST
        })

    return error_response
