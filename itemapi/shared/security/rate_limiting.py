"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client request budget on every route.
Protects against denial-of-service and resource abuse.
Rejected requests never reach validation or error classification.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import PlainTextResponse

DEFAULT_RATE_LIMIT = "100 per 15 minutes"
RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."
HTTP_429 = 429


def build_limiter(rate_limit: str = DEFAULT_RATE_LIMIT) -> Limiter:
    """Create a limiter with its own in-memory counters.

    Args:
        rate_limit: Default limit applied to every route, in limits
            notation (e.g. ``"100 per 15 minutes"``).

    Returns:
        A Limiter keyed by client address.
    """
    return Limiter(key_func=get_remote_address, default_limits=[rate_limit])


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> PlainTextResponse:
    """Handle rate limit exceeded errors with a fixed text response.

    Synchronous because SlowAPIMiddleware calls it without awaiting.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 plain-text response.
    """
    return PlainTextResponse(RATE_LIMIT_MESSAGE, status_code=HTTP_429)
