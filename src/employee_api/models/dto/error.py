"""Error response DTOs."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body shared by every error response."""

    status: int = Field(description="HTTP status code")
    error: str = Field(description="Machine-readable error kind")
    message: str = Field(description="Human-readable error message")
    path: str = Field(description="Path of the request that failed")
    correlation_id: str = Field(description="Identifier to quote in support requests")
    details: dict[str, Any] | None = Field(default=None, description="Additional error context")
