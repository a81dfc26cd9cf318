"""Application layer error types.

Handlers return ``Failure(ApplicationError(...))`` for every expected failure.
The presentation layer maps ``code`` to an HTTP status and uses ``reason``
(when present) as the machine-readable code in the error envelope.

Exports:
    ApplicationErrorCode: Error category (drives the HTTP status)
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.enums import ErrorCode


class ApplicationErrorCode(Enum):
    """Application-level error categories.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.CONFLICT,
        ...     message="Email already registered",
        ...     reason=ErrorCode.EMAIL_ALREADY_EXISTS,
        ... )
    """

    VALIDATION_FAILED = "validation_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Error category (from ApplicationErrorCode enum).
        message: Human-readable message safe to show the caller.
        reason: Specific machine-readable reason (EMAIL_ALREADY_EXISTS, ...).
        details: Additional context as key-value pairs.

    Examples:
        >>> ApplicationError(
        ...     code=ApplicationErrorCode.UNAUTHORIZED,
        ...     message="Invalid credentials",
        ...     reason=ErrorCode.INVALID_CREDENTIALS,
        ... )
    """

    code: ApplicationErrorCode
    message: str
    reason: ErrorCode | None = None
    details: dict[str, str] | None = None
