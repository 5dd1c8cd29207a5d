"""Pydantic schemas shared by the weather services."""

from shared.schemas.common import ErrorResponse, HealthResponse, MessageResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
]
