"""Common schemas used across services."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Standard health check response."""

    status: str = "ok"


class MessageResponse(BaseModel):
    """Informational response carrying a single human-readable message."""

    message: str


class ErrorResponse(BaseModel):
    """Error body returned with 4xx/5xx responses."""

    error: str
