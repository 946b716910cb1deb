"""Exception handlers translating errors into structured error responses.

Every error leaves the API as an ``ErrorResponse`` body: status, error kind,
message, request path and a correlation ID. Raw exception text and stack
traces are logged, never returned.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_api.config import get_settings
from employee_api.constants.paths import EMPLOYEE_BASE_PATH
from employee_api.exceptions import ConflictError, EmployeeAPIError, ValidationError
from employee_api.models.dto.error import ErrorResponse
from employee_api.utils.request_id import generate_request_id, get_request_id
from employee_api.utils.secure_logging import log_error, log_info, log_warning
from employee_api.utils.validation import format_field_errors

logger = logging.getLogger(__name__)

# Safe error messages that can be shown to users
SAFE_ERROR_MESSAGES = {
    400: "Invalid request",
    404: "Resource not found",
    405: "Method not allowed",
    409: "Conflict with existing resource",
    415: "Unsupported media type",
    500: "Internal server error",
    503: "Service temporarily unavailable",
}


def build_error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: dict[str, Any] | None = None,
    correlation_id: str | None = None,
    path: str | None = None,
) -> JSONResponse:
    """Build a JSON error response in the shared error shape.

    Args:
        request: The failed request
        status_code: HTTP status code
        error: Machine-readable error kind
        message: Human-readable message
        details: Optional additional context
        correlation_id: Correlation ID, defaults to the request ID
        path: Path tag, defaults to the request path

    Returns:
        JSONResponse carrying an ErrorResponse body
    """
    body = ErrorResponse(
        status=status_code,
        error=error,
        message=message,
        path=path or request.url.path,
        correlation_id=correlation_id or get_request_id(request),
        details=details or None,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def conflict_response(request: Request, exc: ConflictError) -> JSONResponse:
    """Build the generic conflict response for a rejected create.

    The body carries the fixed message, the employee endpoint path and a
    freshly generated correlation ID, which is logged next to the request ID.
    """
    correlation_id = generate_request_id()
    logger.info(
        f"Conflict on {request.method} {request.url.path}: correlation_id={correlation_id} "
        f"request_id={get_request_id(request)}"
    )
    return build_error_response(
        request,
        status.HTTP_409_CONFLICT,
        exc.error,
        exc.message,
        correlation_id=correlation_id,
        path=EMPLOYEE_BASE_PATH,
    )


async def employee_api_exception_handler(request: Request, exc: EmployeeAPIError) -> JSONResponse:
    """Handle domain exceptions raised by the service layer.

    Args:
        request: FastAPI request
        exc: Domain exception

    Returns:
        JSONResponse with the error's status and kind
    """
    if isinstance(exc, ConflictError):
        return conflict_response(request, exc)

    if isinstance(exc, ValidationError):
        log_warning(
            logger,
            f"Validation error for {request.method} {request.url.path}: "
            f"fields={[e['field'] for e in exc.field_errors]}",
        )
    else:
        log_info(logger, f"{type(exc).__name__} for {request.method} {request.url.path}", exc)

    return build_error_response(request, exc.status_code, exc.error, exc.message, exc.details)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation failures as 400 with field-level details.

    Args:
        request: FastAPI request
        exc: Validation exception

    Returns:
        JSONResponse with the offending fields
    """
    field_errors = format_field_errors(exc.errors())
    return await employee_api_exception_handler(request, ValidationError(field_errors))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle framework HTTP exceptions (unknown routes, wrong methods).

    Args:
        request: FastAPI request
        exc: HTTP exception

    Returns:
        JSONResponse in the shared error shape
    """
    settings = get_settings()
    message = SAFE_ERROR_MESSAGES.get(exc.status_code, "Request failed")
    if settings.debug and isinstance(exc.detail, str):
        message = exc.detail

    response = build_error_response(request, exc.status_code, "http_error", message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle database exceptions without leaking database details.

    Args:
        request: FastAPI request
        exc: SQLAlchemy exception

    Returns:
        JSONResponse with a generic message
    """
    if isinstance(exc, IntegrityError):
        log_info(logger, f"Integrity error for {request.method} {request.url.path}", exc)
        return conflict_response(request, ConflictError("Resource already exists"))

    log_error(logger, f"Database error for {request.method} {request.url.path}", exc)
    return build_error_response(
        request,
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "database_error",
        SAFE_ERROR_MESSAGES[503],
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking information.

    Args:
        request: FastAPI request
        exc: Unexpected exception

    Returns:
        JSONResponse with generic error
    """
    settings = get_settings()
    log_error(logger, f"Unhandled exception for {request.method} {request.url.path}", exc)

    details = {"type": type(exc).__name__} if settings.debug else None
    return build_error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        SAFE_ERROR_MESSAGES[500],
        details,
    )
