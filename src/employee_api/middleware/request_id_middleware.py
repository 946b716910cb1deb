"""Request ID middleware."""

import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from employee_api.constants.paths import HEALTH_PATH
from employee_api.utils.request_id import (
    REQUEST_ID_HEADER,
    generate_request_id,
    is_valid_request_id,
)

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assign a correlation ID to every request and log its outcome.

    A valid UUID in the incoming ``X-Request-ID`` header is reused, otherwise
    a new one is generated. The ID is echoed in the response header and is
    the ``correlation_id`` of error bodies.
    """

    # Paths excluded from per-request logging
    QUIET_PATHS = {
        HEALTH_PATH,
        "/docs",
        "/redoc",
        "/openapi.json",
    }

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Response],
    ) -> Response:
        """Process the request.

        Args:
            request: Incoming request
            call_next: Next middleware/handler

        Returns:
            Response from downstream handler
        """
        incoming = request.headers.get(REQUEST_ID_HEADER)
        request.state.request_id = incoming if is_valid_request_id(incoming) else generate_request_id()

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers[REQUEST_ID_HEADER] = request.state.request_id

        if request.url.path not in self.QUIET_PATHS:
            level = logging.INFO if response.status_code < 400 else logging.WARNING
            logger.log(
                level,
                f"{request.method} {request.url.path} status={response.status_code} "
                f"duration_ms={elapsed_ms:.1f} request_id={request.state.request_id}",
            )

        return response
