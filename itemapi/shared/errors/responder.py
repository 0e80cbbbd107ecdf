"""
Error responder.

Turns a classified error into the canonical JSON envelope.
The ``stack`` member is only ever present when the caller asks for
it, which the application does outside production.
"""

from typing import Any, Optional

from starlette.requests import Request
from starlette.responses import JSONResponse

from itemapi.shared.errors.classifier import (
    ClassifiedError,
    classify,
    format_stack,
    log_classification,
)
from itemapi.shared.errors.schemas import ErrorBody, ErrorEnvelope, FailureDetail
from itemapi.shared.timestamps import iso_timestamp


def build_error_envelope(
    classified: ClassifiedError,
    path: str,
    method: str,
    stack: Optional[str] = None,
) -> dict[str, Any]:
    """Build the wire form of an error envelope.

    Args:
        classified: The resolved error.
        path: Request path.
        method: Request method.
        stack: Diagnostic trace; omitted from the body when None.

    Returns:
        A JSON-ready dict.
    """
    details = [
        FailureDetail(
            field=failure.field,
            message=failure.message,
            rejected_value=failure.rejected_value,
        )
        for failure in classified.details
    ]
    envelope = ErrorEnvelope(
        timestamp=iso_timestamp(),
        path=path,
        method=method,
        error=ErrorBody(
            code=classified.status_code,
            message=classified.message,
            details=details or None,
            stack=stack,
        ),
    )
    return envelope.model_dump(mode="json", by_alias=True, exclude_none=True)


def render_error(
    request: Request, exc: BaseException, include_stack: bool
) -> JSONResponse:
    """Classify, log and render an exception as an error envelope response."""
    classified = classify(exc)
    log_classification(
        classified,
        exc,
        method=request.method,
        path=request.url.path,
        client=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    stack = format_stack(exc) if include_stack else None
    return JSONResponse(
        status_code=classified.status_code,
        content=build_error_envelope(
            classified, path=request.url.path, method=request.method, stack=stack
        ),
    )
