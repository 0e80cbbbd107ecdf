"""
Domain errors shared by every resource.

All errors raised on purpose by the application are defined here.
Each carries an explicit ErrorKind and HTTP status so the interface
layer can map them without inspecting names.
No framework imports allowed.
"""

from enum import Enum
from typing import Optional, Sequence

from itemapi.domain.validation import ValidationFailure


class ErrorKind(Enum):
    """Category of a failure, used to pick the response status and message."""

    VALIDATION = "validation"
    CAST = "cast"
    AUTH_TOKEN_INVALID = "auth_token_invalid"
    AUTH_TOKEN_EXPIRED = "auth_token_expired"
    GENERIC = "generic"


class ApiError(Exception):
    """Base error for all expected, client-facing failures."""

    kind = ErrorKind.GENERIC
    status_code = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Sequence[ValidationFailure] = (),
    ) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = tuple(details)
        super().__init__(self.message)


class InputValidationError(ApiError):
    """Raised when request values violate one or more declared rules."""

    kind = ErrorKind.VALIDATION
    status_code = 400

    def __init__(self, failures: Sequence[ValidationFailure]) -> None:
        super().__init__("Validation failed", details=failures)


class InvalidIdentifierError(ApiError):
    """Raised when a path identifier cannot be parsed."""

    kind = ErrorKind.CAST
    status_code = 400

    def __init__(self, raw_id: object) -> None:
        super().__init__("Invalid ID parameter")
        self.raw_id = raw_id


class InvalidTokenError(ApiError):
    """Raised by the auth layer when a bearer token is malformed or forged."""

    kind = ErrorKind.AUTH_TOKEN_INVALID
    status_code = 401

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message)


class TokenExpiredError(ApiError):
    """Raised by the auth layer when a bearer token is past its expiry."""

    kind = ErrorKind.AUTH_TOKEN_EXPIRED
    status_code = 401

    def __init__(self, message: str = "Token expired") -> None:
        super().__init__(message)


class ItemNotFoundError(ApiError):
    """Raised when an item does not exist."""

    status_code = 404

    def __init__(self, item_id: int) -> None:
        super().__init__("Item not found")
        self.item_id = item_id


class PayloadTooLargeError(ApiError):
    """Raised when a request body exceeds the configured limit."""

    status_code = 413

    def __init__(self, limit_bytes: int) -> None:
        super().__init__("Payload Too Large")
        self.limit_bytes = limit_bytes
