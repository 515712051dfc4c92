"""
Global error responder.

Every failure raised while handling a request ends up here and is rendered
as the same JSON envelope:

    {"success": false, "message": ..., "error": ..., "statusCode": ...,
     "timestamp": ..., "path": ...}

No stack traces or internal details are exposed to clients.
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Tuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.errors import AppError

logger = logging.getLogger(__name__)

INTERNAL_STATUS = 500
INTERNAL_MESSAGE = "Internal server error"
INTERNAL_ERROR = "Error"

# Defaults for failures that carry a status code but no structured fields
KNOWN_STATUSES = {
    400: ("Bad Request", "BadRequestException"),
    401: ("Unauthorized", "UnauthorizedException"),
    403: ("Forbidden", "ForbiddenException"),
    404: ("Not Found", "NotFoundException"),
    409: ("Conflict", "ConflictException"),
}


def _join_message(message: Any) -> str:
    if isinstance(message, (list, tuple)):
        return ", ".join(str(part) for part in message)
    return str(message)


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return INTERNAL_ERROR


def _validation_messages(exc: RequestValidationError) -> list:
    messages = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{field}: {err['msg']}" if field else err["msg"])
    return messages


def resolve_error(exc: BaseException) -> Tuple[int, str, str]:
    """Map any failure to ``(status_code, message, error)``."""
    if isinstance(exc, AppError) and exc.status_code < INTERNAL_STATUS:
        return exc.status_code, _join_message(exc.message), exc.error

    if isinstance(exc, RequestValidationError):
        return 400, _join_message(_validation_messages(exc)), "Bad Request"

    if isinstance(exc, StarletteHTTPException):
        status_code = exc.status_code
        default_message, _ = KNOWN_STATUSES.get(status_code, (_reason_phrase(status_code), None))
        detail = exc.detail
        if isinstance(detail, dict):
            message = detail.get("message") or default_message
            error = detail.get("error") or _reason_phrase(status_code)
        else:
            message = detail or default_message
            error = _reason_phrase(status_code)
        return status_code, _join_message(message), error

    status_code = getattr(exc, "status_code", None) or getattr(exc, "status", None)
    if status_code in KNOWN_STATUSES:
        default_message, default_error = KNOWN_STATUSES[status_code]
        message = getattr(exc, "message", None) or str(exc) or default_message
        error = type(exc).__name__ or default_error
        return status_code, _join_message(message), error

    return INTERNAL_STATUS, INTERNAL_MESSAGE, INTERNAL_ERROR


def build_error_body(exc: BaseException, path: str) -> Tuple[int, dict]:
    """Build the status code and JSON envelope for a failure."""
    status_code, message, error = resolve_error(exc)
    body = {
        "success": False,
        "message": message,
        "error": error,
        "statusCode": status_code,
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "path": path,
    }
    return status_code, body


async def handle_exception(request: Request, exc: Exception) -> JSONResponse:
    """Translate a failure raised during request handling into a response."""
    status_code, body = build_error_body(exc, request.url.path)
    if status_code == INTERNAL_STATUS:
        logger.error(
            "Unhandled error on %s %s: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
            exc_info=exc,
        )
    # Keeps Allow on 405 and WWW-Authenticate on 401
    return JSONResponse(status_code=status_code, content=body, headers=getattr(exc, "headers", None))


def register_error_handlers(app: FastAPI) -> None:
    """Register the error responder on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(AppError, handle_exception)
    app.add_exception_handler(StarletteHTTPException, handle_exception)
    app.add_exception_handler(RequestValidationError, handle_exception)
    app.add_exception_handler(Exception, handle_exception)
