"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST /auth/register              - Create unverified account
    POST /auth/verify-email          - Consume registration code
    POST /auth/resend-verification   - Reissue registration code
    POST /auth/forgot-password       - Issue password reset code
    POST /auth/reset-password        - Consume reset code, set password
    POST /auth/login                 - Password login
    POST /auth/2fa/login             - Complete login with a TOTP code
    POST /auth/refresh               - New access token
    GET  /auth/profile               - Authenticated account
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.types import Email, Password, PhoneNumber, SixDigitCode


# =============================================================================
# Registration and email verification
# =============================================================================


class RegisterRequest(BaseModel):
    """Request schema for registration.

    POST /auth/register
    Returns: 201 Created
    """

    email: Email
    password: Password
    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Display name",
        examples=["Jane Doe"],
    )
    phone_number: PhoneNumber | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "SecurePass123",
                "name": "Jane Doe",
            }
        }
    )


class VerifyEmailRequest(BaseModel):
    """POST /auth/verify-email"""

    email: Email
    code: SixDigitCode


class EmailRequest(BaseModel):
    """Request carrying only an address.

    Used by POST /auth/resend-verification and POST /auth/forgot-password.
    """

    email: Email


class ResetPasswordRequest(BaseModel):
    """POST /auth/reset-password"""

    email: Email
    code: SixDigitCode
    new_password: Password


# =============================================================================
# Login and tokens
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for password login.

    Password strength is not re-validated here; accounts created before a
    policy change must still be able to log in.
    """

    email: Email
    password: str = Field(..., min_length=1, max_length=128)


class TwoFactorLoginRequest(BaseModel):
    """POST /auth/2fa/login"""

    temp_token: str = Field(..., min_length=1, description="Pending 2FA token")
    code: SixDigitCode


class RefreshTokenRequest(BaseModel):
    """POST /auth/refresh"""

    refresh_token: str = Field(..., min_length=1, description="Refresh token")


class AccountResponse(BaseModel):
    """Public account view (never the hash or TOTP secret)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    name: str
    role: str
    is_verified: bool
    two_factor_enabled: bool
    phone_number: str | None = None
    avatar: str | None = None


class TokenResponse(BaseModel):
    """Access/refresh token pair."""

    model_config = ConfigDict(from_attributes=True)

    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="Refresh token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Access token lifetime in seconds")


class LoginResponse(BaseModel):
    """Login outcome.

    When ``requires_2fa`` is True only ``temp_token`` is set; no device or
    session exists yet.
    """

    requires_2fa: bool = False
    temp_token: str | None = None
    tokens: TokenResponse | None = None
    account: AccountResponse | None = None
    device_id: UUID | None = None


class ProfileResponse(BaseModel):
    """GET /auth/profile"""

    account: AccountResponse
    permissions: list[str] = Field(default_factory=list)
    device_id: UUID | None = None
