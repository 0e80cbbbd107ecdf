"""
Centralized error handlers for FastAPI.

Routes every expected failure through the classifier and responder
so all /api errors share one envelope. Unexpected faults are left to
ErrorEnvelopeMiddleware.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from itemapi.domain.errors import ApiError
from itemapi.shared.errors.responder import render_error
from itemapi.shared.errors.schemas import RouteNotFoundResponse

logger = logging.getLogger(__name__)

HTTP_404 = 404


def _original_url(request: Request) -> str:
    if request.url.query:
        return f"{request.url.path}?{request.url.query}"
    return request.url.path


def route_not_found_response(request: Request) -> JSONResponse:
    """Build the 404 body for a request no route matched."""
    body = RouteNotFoundResponse(path=_original_url(request))
    return JSONResponse(status_code=HTTP_404, content=body.model_dump())


def register_error_handlers(app: FastAPI, include_stack: bool) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        include_stack: Put diagnostic traces in error bodies.
    """

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        """Handle errors raised on purpose by use cases and middleware."""
        return render_error(request, exc, include_stack)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed bodies and parameters rejected by FastAPI."""
        return render_error(request, exc, include_stack)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle HTTP errors, including requests that matched no route."""
        if exc.status_code == HTTP_404 and "endpoint" not in request.scope:
            logger.info("Route not found: %s %s", request.method, request.url.path)
            return route_not_found_response(request)
        return render_error(request, exc, include_stack)
