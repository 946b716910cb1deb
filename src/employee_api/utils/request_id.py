"""Request ID generation utilities."""

import uuid

from fastapi import Request

REQUEST_ID_HEADER = "X-Request-ID"


def generate_request_id() -> str:
    """Generate a unique request ID for tracing.

    Returns:
        A UUID4 string for request tracking across the application.
    """
    return str(uuid.uuid4())


def is_valid_request_id(value: str | None) -> bool:
    """Check that a client-supplied request ID is a UUID."""
    if not value:
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def get_request_id(request: Request) -> str:
    """Get the request ID assigned by the request ID middleware.

    Falls back to a fresh ID when the middleware did not run (e.g. errors
    raised before it).
    """
    request_id = getattr(request.state, "request_id", None)
    if request_id is None:
        request_id = generate_request_id()
        request.state.request_id = request_id
    return request_id
