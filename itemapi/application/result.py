"""
Result: the return type of every use case.

A use case either succeeds with a value or fails with an ApiError.
Expected failures (invalid input, missing resources) travel as values;
only unexpected faults are raised.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from itemapi.domain.errors import ApiError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a use case.

    Attributes:
        value: Payload on success.
        error: The failure, if the use case did not succeed.
    """

    value: Optional[T] = None
    error: Optional[ApiError] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: ApiError) -> "Result[T]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the carried error.

        Raises:
            ApiError: If the result is a failure.
        """
        if self.error is not None:
            raise self.error
        return self.value
