"""
Pydantic schemas for the error envelope.

Every failed /api response uses ErrorEnvelope.
Optional members are omitted from the wire, never sent as null.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class FailureDetail(BaseModel):
    """A single violated rule."""

    field: str
    message: str
    rejected_value: Any = Field(default=None, serialization_alias="rejectedValue")


class ErrorBody(BaseModel):
    """The ``error`` member of the envelope."""

    code: int
    message: str
    details: Optional[list[FailureDetail]] = None
    stack: Optional[str] = None


class ErrorEnvelope(BaseModel):
    """Top-level API error response envelope."""

    success: bool = False
    timestamp: str
    path: str
    method: str
    error: ErrorBody


class RouteNotFoundResponse(BaseModel):
    """Body returned when no route matches the request."""

    error: str = "Route not found"
    path: str
