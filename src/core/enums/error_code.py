"""Machine-readable error codes returned in the error envelope.

Codes follow ENTITY_REASON naming and are rendered verbatim in
``error.code`` of the HTTP error envelope. The HTTP status is decided by the
ApplicationErrorCode category, not by these values.

Categories:
- Generic status codes (BAD_REQUEST, UNAUTHORIZED, ...)
- Account errors (EMAIL_ALREADY_EXISTS, USER_NOT_FOUND, ACCOUNT_BLOCKED, ...)
- Credential and token errors (INVALID_CREDENTIALS, INVALID_TOKEN, ...)
- Verification code errors (INVALID_VERIFICATION_CODE, VERIFICATION_THROTTLED)
- Two-factor errors (TWO_FACTOR_*, INVALID_TWO_FACTOR_CODE)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes (envelope ``error.code``)."""

    # Generic (derived from HTTP status when no specific reason exists)
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Account errors
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    EMAIL_NOT_VERIFIED = "EMAIL_NOT_VERIFIED"
    ACCOUNT_BLOCKED = "ACCOUNT_BLOCKED"
    PASSWORD_NOT_SET = "PASSWORD_NOT_SET"

    # Credential and token errors
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    INSUFFICIENT_PERMISSIONS = "INSUFFICIENT_PERMISSIONS"

    # Verification code errors
    INVALID_VERIFICATION_CODE = "INVALID_VERIFICATION_CODE"
    VERIFICATION_THROTTLED = "VERIFICATION_THROTTLED"

    # Two-factor errors
    TWO_FACTOR_ALREADY_ENABLED = "TWO_FACTOR_ALREADY_ENABLED"
    TWO_FACTOR_NOT_ENABLED = "TWO_FACTOR_NOT_ENABLED"
    TWO_FACTOR_NOT_INITIATED = "TWO_FACTOR_NOT_INITIATED"
    INVALID_TWO_FACTOR_CODE = "INVALID_TWO_FACTOR_CODE"

    # Device and session errors
    DEVICE_NOT_FOUND = "DEVICE_NOT_FOUND"

    # Federated login errors
    OAUTH_FAILED = "OAUTH_FAILED"
