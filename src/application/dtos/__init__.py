"""Data Transfer Objects (DTOs) for application layer.

DTOs are result dataclasses returned by command and query handlers.

Note:
    DTOs are NOT the same as:
    - Domain protocol data types (port interface contracts in domain layer)
    - API schemas (Pydantic models in presentation layer)
"""

from src.application.dtos.auth_dtos import (
    AccountSummary,
    AuthTokens,
    IssuedSession,
    LoginResult,
    MessageResult,
    RefreshResult,
    RegistrationResult,
)

__all__ = [
    "AccountSummary",
    "AuthTokens",
    "IssuedSession",
    "LoginResult",
    "MessageResult",
    "RefreshResult",
    "RegistrationResult",
]
