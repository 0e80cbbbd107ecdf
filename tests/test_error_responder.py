"""
Tests for the error responder and the top-level error adapter.

The envelope builder is tested directly; the middleware is driven
with hand-written ASGI apps so the response-already-started path
can be exercised.
"""

import asyncio
import json
import re

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from itemapi.domain.errors import ErrorKind
from itemapi.domain.validation import ValidationFailure
from itemapi.shared.errors.classifier import ClassifiedError
from itemapi.shared.errors.middleware import ErrorEnvelopeMiddleware
from itemapi.shared.errors.responder import build_error_envelope

ISO_TIMESTAMP = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")

HTTP_SCOPE = {
    "type": "http",
    "http_version": "1.1",
    "method": "GET",
    "scheme": "http",
    "server": ("testserver", 80),
    "path": "/boom",
    "raw_path": b"/boom",
    "root_path": "",
    "query_string": b"",
    "headers": [],
}


async def _receive() -> dict:
    return {"type": "http.request", "body": b"", "more_body": False}


def _run(app, scope: dict) -> list[dict]:
    sent: list[dict] = []

    async def send(message: dict) -> None:
        sent.append(message)

    asyncio.run(app(dict(scope), _receive, send))
    return sent


class TestBuildErrorEnvelope:
    """Tests for build_error_envelope()."""

    def test_envelope_shape(self) -> None:
        classified = ClassifiedError(404, "Item not found", ErrorKind.GENERIC)
        body = build_error_envelope(classified, path="/api/items/9", method="GET")
        assert set(body) == {"success", "timestamp", "path", "method", "error"}
        assert body["success"] is False
        assert ISO_TIMESTAMP.match(body["timestamp"])
        assert body["path"] == "/api/items/9"
        assert body["method"] == "GET"
        assert body["error"] == {"code": 404, "message": "Item not found"}

    def test_details_are_listed_in_order(self) -> None:
        classified = ClassifiedError(
            400,
            "Validation failed",
            ErrorKind.VALIDATION,
            (
                ValidationFailure("name", "name is required"),
                ValidationFailure("category", "category must be a string", 7),
            ),
        )
        body = build_error_envelope(classified, path="/api/items", method="POST")
        assert body["error"]["details"] == [
            {"field": "name", "message": "name is required"},
            {"field": "category", "message": "category must be a string", "rejectedValue": 7},
        ]

    def test_stack_only_when_given(self) -> None:
        classified = ClassifiedError(500, "Internal Server Error", ErrorKind.GENERIC)
        assert "stack" not in build_error_envelope(classified, "/", "GET")["error"]
        body = build_error_envelope(classified, "/", "GET", stack="Traceback ...")
        assert body["error"]["stack"] == "Traceback ..."


class TestErrorEnvelopeMiddleware:
    """Tests for the pure ASGI error adapter."""

    def test_renders_error_when_nothing_was_sent(self) -> None:
        async def failing_app(scope, receive, send):
            raise RuntimeError("secret connection string")

        sent = _run(ErrorEnvelopeMiddleware(failing_app), HTTP_SCOPE)
        assert sent[0]["type"] == "http.response.start"
        assert sent[0]["status"] == 500
        body = json.loads(sent[1]["body"])
        assert body["error"] == {"code": 500, "message": "Internal Server Error"}
        assert body["path"] == "/boom"
        assert b"secret" not in sent[1]["body"]

    def test_forwards_error_after_response_started(self) -> None:
        async def half_sent_app(scope, receive, send):
            await send({"type": "http.response.start", "status": 200, "headers": []})
            raise RuntimeError("mid-stream")

        sent: list[dict] = []

        async def send(message: dict) -> None:
            sent.append(message)

        middleware = ErrorEnvelopeMiddleware(half_sent_app)
        with pytest.raises(RuntimeError, match="mid-stream"):
            asyncio.run(middleware(dict(HTTP_SCOPE), _receive, send))
        assert len(sent) == 1
        assert sent[0]["status"] == 200

    def test_non_http_scopes_pass_through(self) -> None:
        calls: list[str] = []

        async def lifespan_app(scope, receive, send):
            calls.append(scope["type"])

        _run(ErrorEnvelopeMiddleware(lifespan_app), {"type": "lifespan"})
        assert calls == ["lifespan"]

    def test_stack_included_on_request(self) -> None:
        async def failing_app(scope, receive, send):
            raise ValueError("bad state")

        sent = _run(ErrorEnvelopeMiddleware(failing_app, include_stack=True), HTTP_SCOPE)
        body = json.loads(sent[1]["body"])
        assert "ValueError: bad state" in body["error"]["stack"]

    def test_wraps_fastapi_app(self) -> None:
        app = FastAPI()

        @app.get("/explode")
        def explode() -> None:
            raise KeyError("missing")

        app.add_middleware(ErrorEnvelopeMiddleware)
        response = TestClient(app).get("/explode")
        assert response.status_code == 500
        assert response.json()["method"] == "GET"
        assert "stack" not in response.json()["error"]
