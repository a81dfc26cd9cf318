"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import LoginRequest, SuccessResponse
"""

from src.schemas.admin_schemas import (
    AccountStatusUpdateRequest,
    VerificationCodeStatisticsResponse,
)
from src.schemas.auth_schemas import (
    AccountResponse,
    EmailRequest,
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    RefreshTokenRequest,
    RegisterRequest,
    ResetPasswordRequest,
    TokenResponse,
    TwoFactorLoginRequest,
    VerifyEmailRequest,
)
from src.schemas.common_schemas import (
    CountResponse,
    ErrorBody,
    ErrorResponse,
    SuccessResponse,
)
from src.schemas.session_schemas import DeviceResponse, SessionResponse
from src.schemas.two_factor_schemas import (
    TwoFactorCodeRequest,
    TwoFactorDisableRequest,
    TwoFactorSetupResponse,
    TwoFactorStatusResponse,
)

__all__ = [
    # Envelopes
    "CountResponse",
    "ErrorBody",
    "ErrorResponse",
    "SuccessResponse",
    # Auth
    "AccountResponse",
    "EmailRequest",
    "LoginRequest",
    "LoginResponse",
    "ProfileResponse",
    "RefreshTokenRequest",
    "RegisterRequest",
    "ResetPasswordRequest",
    "TokenResponse",
    "TwoFactorLoginRequest",
    "VerifyEmailRequest",
    # Sessions and devices
    "DeviceResponse",
    "SessionResponse",
    # Two-factor
    "TwoFactorCodeRequest",
    "TwoFactorDisableRequest",
    "TwoFactorSetupResponse",
    "TwoFactorStatusResponse",
    # Admin
    "AccountStatusUpdateRequest",
    "VerificationCodeStatisticsResponse",
]
