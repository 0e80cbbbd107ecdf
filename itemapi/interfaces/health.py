"""
Health check router.

Provides a liveness endpoint at the server root.
No business logic. Returns status, timestamp and uptime.
"""

import time

from fastapi import APIRouter, Request
from pydantic import BaseModel

from itemapi.shared.timestamps import iso_timestamp

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    timestamp: str
    uptime: float


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application status, current time and uptime in seconds.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    uptime = time.monotonic() - request.app.state.started_at
    return HealthResponse(status="OK", timestamp=iso_timestamp(), uptime=round(uptime, 3))
