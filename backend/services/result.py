"""
Result values for the business layer.

Validation and service steps return a ``Result`` instead of raising. The
first failing step short-circuits the chain and its error travels up to the
endpoint, which renders it as a soft ``{"error": ...}`` body.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from exceptions import ApplicationError

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or an ApplicationError, never both."""

    value: Optional[T] = None
    error: Optional[ApplicationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ApplicationError) -> "Result[T]":
        return cls(error=error)

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        """Transform the value on success."""
        if not self.ok:
            return Result.failure(self.error)
        return Result.success(fn(self.value))

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None
