"""Prebuilt application errors for the authentication flows.

Usage:
    from src.application.errors import AuthFailures

    if account is None:
        return Failure(error=AuthFailures.INVALID_CREDENTIALS)
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)
from src.core.enums import ErrorCode


class AuthFailures:
    """Error constants grouped by category.

    Login-adjacent failures deliberately share messages so callers cannot
    tell which check failed.
    """

    # Conflict (409)
    EMAIL_ALREADY_EXISTS = ApplicationError(
        code=ApplicationErrorCode.CONFLICT,
        message="Email already registered",
        reason=ErrorCode.EMAIL_ALREADY_EXISTS,
    )
    TWO_FACTOR_ALREADY_ENABLED = ApplicationError(
        code=ApplicationErrorCode.CONFLICT,
        message="Two-factor authentication is already enabled",
        reason=ErrorCode.TWO_FACTOR_ALREADY_ENABLED,
    )

    # Validation (400)
    INVALID_VERIFICATION_CODE = ApplicationError(
        code=ApplicationErrorCode.VALIDATION_FAILED,
        message="Invalid or expired verification code",
        reason=ErrorCode.INVALID_VERIFICATION_CODE,
    )
    PASSWORD_NOT_SET = ApplicationError(
        code=ApplicationErrorCode.VALIDATION_FAILED,
        message="This account has no password. Sign in with Google instead",
        reason=ErrorCode.PASSWORD_NOT_SET,
    )
    TWO_FACTOR_NOT_INITIATED = ApplicationError(
        code=ApplicationErrorCode.VALIDATION_FAILED,
        message="Two-factor setup has not been started",
        reason=ErrorCode.TWO_FACTOR_NOT_INITIATED,
    )
    TWO_FACTOR_NOT_ENABLED = ApplicationError(
        code=ApplicationErrorCode.VALIDATION_FAILED,
        message="Two-factor authentication is not enabled",
        reason=ErrorCode.TWO_FACTOR_NOT_ENABLED,
    )

    # Unauthorized (401)
    INVALID_CREDENTIALS = ApplicationError(
        code=ApplicationErrorCode.UNAUTHORIZED,
        message="Invalid email or password",
        reason=ErrorCode.INVALID_CREDENTIALS,
    )
    LOGIN_PASSWORD_NOT_SET = ApplicationError(
        code=ApplicationErrorCode.UNAUTHORIZED,
        message="This account has no password. Sign in with Google instead",
        reason=ErrorCode.PASSWORD_NOT_SET,
    )
    EMAIL_NOT_VERIFIED = ApplicationError(
        code=ApplicationErrorCode.UNAUTHORIZED,
        message="Email address is not verified",
        reason=ErrorCode.EMAIL_NOT_VERIFIED,
    )
    ACCOUNT_BLOCKED = ApplicationError(
        code=ApplicationErrorCode.UNAUTHORIZED,
        message="Account is blocked",
        reason=ErrorCode.ACCOUNT_BLOCKED,
    )
    INVALID_TOKEN = ApplicationError(
        code=ApplicationErrorCode.UNAUTHORIZED,
        message="Invalid or expired token",
        reason=ErrorCode.INVALID_TOKEN,
    )
    INVALID_TWO_FACTOR_CODE = ApplicationError(
        code=ApplicationErrorCode.UNAUTHORIZED,
        message="Invalid two-factor code",
        reason=ErrorCode.INVALID_TWO_FACTOR_CODE,
    )
    LOGIN_TWO_FACTOR_NOT_ENABLED = ApplicationError(
        code=ApplicationErrorCode.UNAUTHORIZED,
        message="Two-factor authentication is not enabled",
        reason=ErrorCode.TWO_FACTOR_NOT_ENABLED,
    )
    OAUTH_FAILED = ApplicationError(
        code=ApplicationErrorCode.UNAUTHORIZED,
        message="Google sign-in failed",
        reason=ErrorCode.OAUTH_FAILED,
    )

    # Not found (404)
    USER_NOT_FOUND = ApplicationError(
        code=ApplicationErrorCode.NOT_FOUND,
        message="Account not found",
        reason=ErrorCode.USER_NOT_FOUND,
    )
    DEVICE_NOT_FOUND = ApplicationError(
        code=ApplicationErrorCode.NOT_FOUND,
        message="Device not found",
        reason=ErrorCode.DEVICE_NOT_FOUND,
    )

    # Throttled (429)
    VERIFICATION_THROTTLED = ApplicationError(
        code=ApplicationErrorCode.RATE_LIMIT_EXCEEDED,
        message="A code was sent recently. Please wait before requesting another",
        reason=ErrorCode.VERIFICATION_THROTTLED,
    )

    # Internal (500)
    DEFAULT_ROLE_MISSING = ApplicationError(
        code=ApplicationErrorCode.INTERNAL_ERROR,
        message="Account could not be created",
    )
