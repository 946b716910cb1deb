"""Domain-specific exceptions for the employee API.

These exceptions provide a clean separation between service-layer errors
and HTTP responses, avoiding string matching in routers. Each carries the
machine-readable ``error`` kind and the HTTP status it is answered with.
"""

from typing import Any

from fastapi import status


class EmployeeAPIError(Exception):
    """Base exception for all employee API errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "internal_error"

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Validation Errors (400)
# =============================================================================


class ValidationError(EmployeeAPIError):
    """Raised when a request payload or path parameter is malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    error = "validation_error"

    def __init__(self, field_errors: list[dict[str, str]]) -> None:
        super().__init__("Invalid request", {"fields": field_errors})
        self.field_errors = field_errors


# =============================================================================
# Resource Not Found Errors (404)
# =============================================================================


class NotFoundError(EmployeeAPIError):
    """Raised when no (visible) entity matches the requested identifier."""

    status_code = status.HTTP_404_NOT_FOUND
    error = "not_found"

    def __init__(self, entity: str, field: str, value: str) -> None:
        message = f"{entity} not found with {field} {value}"
        super().__init__(message, {"entity": entity, "field": field, "value": value})
        self.entity = entity
        self.field = field
        self.value = value


# =============================================================================
# Conflict Errors (409)
# =============================================================================


class AlreadyDeletedError(EmployeeAPIError):
    """Raised when soft-deleting an entity that is already inactive."""

    status_code = status.HTTP_409_CONFLICT
    error = "already_deleted"

    def __init__(self, entity: str, value: str) -> None:
        message = f"{entity} with id {value} is already deleted"
        super().__init__(message, {"entity": entity, "value": value})
        self.entity = entity
        self.value = value


class ConflictError(EmployeeAPIError):
    """Raised when the store rejects a write on a uniqueness constraint.

    The message is fixed. The underlying constraint violation is
    logged and never returned to the caller.
    """

    status_code = status.HTTP_409_CONFLICT
    error = "conflict"

    def __init__(self, message: str = "Id already exists") -> None:
        super().__init__(message)
