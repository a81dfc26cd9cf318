"""Result types for railway-oriented programming.

Handlers and adapters return a Result instead of raising for expected
failures (wrong password, expired code, invalid token). Only unexpected
conditions travel as exceptions.

Usage:
    def check_code(submitted: str, stored: str) -> Result[None, str]:
        if submitted != stored:
            return Failure(error="invalid_code")
        return Success(value=None)

    match check_code("123456", stored):
        case Success():
            ...
        case Failure(error=reason):
            logger.warning("code_rejected", reason=reason)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result = Success[T] | Failure[E]
