"""
Request body size limit.

Pure ASGI middleware. A declared Content-Length above the maximum is
rejected before the body is read. A body sent without Content-Length
(chunked) is read up front and counted as it streams in, then replayed
to the application.
"""

from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from itemapi.domain.errors import PayloadTooLargeError


class BodySizeLimitMiddleware:
    """Middleware that enforces a maximum request body size.

    The rejection is raised as PayloadTooLargeError so it renders
    through the error envelope like any other failure.
    """

    def __init__(self, app: ASGIApp, max_bytes: int) -> None:
        self.app = app
        self.max_bytes = max_bytes

    def _declared_too_large(self, declared: str) -> bool:
        if not declared.isdigit():
            return False
        # Compare lengths first; int() refuses very long digit strings
        if len(declared.lstrip("0")) > len(str(self.max_bytes)):
            return True
        return int(declared) > self.max_bytes

    async def _read_body(self, receive: Receive) -> list[Message]:
        """Drain the request body, failing as soon as it exceeds the limit."""
        chunks: list[bytes] = []
        received = 0
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] != "http.request":
                return [message]
            chunk = message.get("body", b"")
            received += len(chunk)
            if received > self.max_bytes:
                raise PayloadTooLargeError(self.max_bytes)
            chunks.append(chunk)
            more_body = message.get("more_body", False)
        return [{"type": "http.request", "body": b"".join(chunks), "more_body": False}]

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length")
        if declared is not None:
            if self._declared_too_large(declared):
                raise PayloadTooLargeError(self.max_bytes)
            await self.app(scope, receive, send)
            return

        pending = await self._read_body(receive)

        async def replay() -> Message:
            if pending:
                return pending.pop(0)
            return await receive()

        await self.app(scope, replay, send)
