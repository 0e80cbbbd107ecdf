"""
Top-level error adapter.

Pure ASGI middleware that converts any fault escaping the inner
application into an error envelope. A request gets at most one
response: once ``http.response.start`` has gone out, the fault is
re-raised to the next handler instead.
"""

import logging

from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from itemapi.shared.errors.responder import render_error

logger = logging.getLogger(__name__)


class ErrorEnvelopeMiddleware:
    """Render unhandled exceptions as error envelopes."""

    def __init__(self, app: ASGIApp, include_stack: bool = False) -> None:
        self.app = app
        self.include_stack = include_stack

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            if response_started:
                logger.error(
                    "Error after response started on %s %s; forwarding",
                    scope.get("method"),
                    scope.get("path"),
                )
                raise
            response = render_error(Request(scope), exc, self.include_stack)
            await response(scope, receive, send)
