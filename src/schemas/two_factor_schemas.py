"""Two-factor authentication schemas.

Endpoints:
    POST   /auth/2fa/setup    - Begin enrollment
    POST   /auth/2fa/verify   - Confirm enrollment
    DELETE /auth/2fa/disable  - Disable 2FA
    GET    /auth/2fa/status   - Enrollment state
"""

from pydantic import BaseModel, ConfigDict, Field

from src.domain.types import SixDigitCode


class TwoFactorSetupResponse(BaseModel):
    """Enrollment payload for an authenticator app."""

    model_config = ConfigDict(from_attributes=True)

    secret: str = Field(..., description="Base32 TOTP secret")
    otpauth_url: str = Field(..., description="otpauth:// enrollment URI")
    qr_code: str = Field(..., description="PNG QR code as a data URL")


class TwoFactorCodeRequest(BaseModel):
    code: SixDigitCode


class TwoFactorDisableRequest(BaseModel):
    """Password re-confirmation plus a current TOTP code."""

    password: str = Field(..., min_length=1, max_length=128)
    code: SixDigitCode


class TwoFactorStatusResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    is_2fa_enabled: bool
    has_secret: bool
