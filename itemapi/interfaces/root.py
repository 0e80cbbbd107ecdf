"""
API index routes mounted under /api.

A welcome message, a lightweight status check and, outside
production, a route that fails on purpose to exercise the error
pipeline.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from itemapi.shared.timestamps import iso_timestamp

router = APIRouter(tags=["root"])
diagnostics_router = APIRouter(tags=["diagnostics"])


class WelcomeResponse(BaseModel):
    message: str
    timestamp: str


class StatusResponse(BaseModel):
    status: str
    timestamp: str


@router.get("/", response_model=WelcomeResponse, summary="API index")
def index() -> WelcomeResponse:
    """Return a welcome message."""
    return WelcomeResponse(message="Welcome to the API", timestamp=iso_timestamp())


@router.get("/health", response_model=StatusResponse, summary="API status")
def api_health() -> StatusResponse:
    """Return API status."""
    return StatusResponse(status="OK", timestamp=iso_timestamp())


@diagnostics_router.get("/error", summary="Intentional failure")
def intentional_error() -> None:
    """Raise an unhandled error; renders as a 500 envelope."""
    raise RuntimeError("Intentional test error")
