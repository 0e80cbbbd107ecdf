"""
Error classification.

Maps any exception to a ClassifiedError: an HTTP status, a public
message, an ErrorKind and optional field failures.
classify() is a pure function; logging is a separate step.
"""

import logging
import traceback
from dataclasses import dataclass
from typing import Any, Optional

from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from itemapi.domain.errors import ApiError, ErrorKind
from itemapi.domain.validation import ValidationFailure
from itemapi.shared.timestamps import iso_timestamp

logger = logging.getLogger(__name__)

DEFAULT_STATUS = 500
UNKNOWN_MESSAGE = "Unknown Error"

STATUS_MESSAGES = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    409: "Conflict",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
    503: "Service Unavailable",
}

# Kind-specific status and message, applied over everything else
KIND_OVERRIDES = {
    ErrorKind.VALIDATION: (400, "Validation failed"),
    ErrorKind.CAST: (400, "Invalid ID parameter"),
    ErrorKind.AUTH_TOKEN_EXPIRED: (401, "Token expired"),
    ErrorKind.AUTH_TOKEN_INVALID: (401, "Invalid token"),
}

_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


@dataclass(frozen=True)
class ClassifiedError:
    """An error resolved to what the client will see.

    Attributes:
        status_code: HTTP status (100-599).
        message: Public, user-facing message.
        kind: Category of the error.
        details: Field failures, in rule order.
    """

    status_code: int
    message: str
    kind: ErrorKind
    details: tuple[ValidationFailure, ...] = ()


def status_message(status_code: int) -> str:
    """Return the default message for an HTTP status."""
    return STATUS_MESSAGES.get(status_code, UNKNOWN_MESSAGE)


def _valid_status(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if 100 <= value <= 599 else None


def _extract_status(exc: BaseException) -> int:
    for attribute in ("status_code", "status"):
        status = _valid_status(getattr(exc, attribute, None))
        if status is not None:
            return status
    return DEFAULT_STATUS


def _format_location(location: Any) -> str:
    if not isinstance(location, (tuple, list)):
        return str(location)
    parts = [str(part) for part in location if part not in _REQUEST_LOCATIONS]
    if parts:
        return ".".join(parts)
    return str(location[0]) if location else "request"


def _request_validation_details(exc: RequestValidationError) -> tuple[ValidationFailure, ...]:
    return tuple(
        ValidationFailure(
            field=_format_location(issue.get("loc", ())),
            message=str(issue.get("msg", "Invalid value")),
            rejected_value=issue.get("input"),
        )
        for issue in exc.errors()
    )


def classify(exc: BaseException) -> ClassifiedError:
    """Resolve an exception to a ClassifiedError.

    Resolution order:
        1. Status from ``status_code``, then ``status``, else 500.
        2. Message: an explicit public message if the error carries one,
           else the default message for the status.
        3. Kind overrides for validation, cast and token errors.

    Args:
        exc: Any raised exception.

    Returns:
        The classification. Classifying the same exception twice
        yields equal values.
    """
    status = _extract_status(exc)
    kind = ErrorKind.GENERIC
    details: tuple[ValidationFailure, ...] = ()
    message: Optional[str] = None

    if isinstance(exc, ApiError):
        kind = exc.kind
        details = exc.details
        message = exc.message or None
    elif isinstance(exc, RequestValidationError):
        kind = ErrorKind.VALIDATION
        details = _request_validation_details(exc)
    elif isinstance(exc, StarletteHTTPException):
        if isinstance(exc.detail, str) and exc.detail:
            message = exc.detail

    if kind in KIND_OVERRIDES:
        status, message = KIND_OVERRIDES[kind]

    return ClassifiedError(
        status_code=status,
        message=message or status_message(status),
        kind=kind,
        details=details,
    )


def format_stack(exc: BaseException) -> Optional[str]:
    """Return the formatted traceback of ``exc``, or None if it has none."""
    if exc.__traceback__ is None:
        return None
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def log_classification(
    classified: ClassifiedError,
    exc: BaseException,
    method: str,
    path: str,
    client: Optional[str],
    user_agent: Optional[str],
) -> None:
    """Record a classified error with its request context.

    A failure while logging is dropped; it never reaches the caller.
    """
    try:
        level = logging.ERROR if classified.status_code >= 500 else logging.WARNING
        exc_info = (type(exc), exc, exc.__traceback__) if exc.__traceback__ else None
        logger.log(
            level,
            "[%s] %s %s - %d %s (client=%s, user_agent=%s)",
            iso_timestamp(),
            method,
            path,
            classified.status_code,
            classified.message,
            client or "-",
            user_agent or "-",
            exc_info=exc_info,
        )
    except Exception:
        # Logging failures are never propagated
        pass
