"""Application layer errors.

Exports:
    ApplicationError: Application layer error dataclass
    ApplicationErrorCode: Error category enum
    AuthFailures: Prebuilt errors for the authentication flows
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)
from src.application.errors.auth_failures import AuthFailures

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "AuthFailures",
]
