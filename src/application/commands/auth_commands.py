"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
- Field validation happens in the request schemas (shared Annotated types)
"""

from dataclasses import dataclass

from src.domain.protocols import GoogleProfile
from src.domain.types import Email, Password, PhoneNumber, SixDigitCode


@dataclass(frozen=True, kw_only=True)
class Register:
    """Create an unverified account and send a verification code.

    Attributes:
        email: Address (normalized).
        password: Plaintext password (hashed by the handler).
        name: Display name.
        phone_number: Optional contact number.

    Example:
        >>> command = Register(email="a@x.com", password="SecurePass1", name="A")
        >>> result = await handler.handle(command)
    """

    email: Email
    password: Password
    name: str
    phone_number: PhoneNumber | None = None


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Consume a registration code and mark the address verified."""

    email: Email
    code: SixDigitCode


@dataclass(frozen=True, kw_only=True)
class ResendVerification:
    """Reissue a registration code (throttled)."""

    email: Email


@dataclass(frozen=True, kw_only=True)
class ForgotPassword:
    """Request a password reset code.

    The response never reveals whether the address has an account.
    """

    email: Email


@dataclass(frozen=True, kw_only=True)
class ResetPassword:
    """Set a new password with a reset code, revoking every session."""

    email: Email
    code: SixDigitCode
    new_password: Password


@dataclass(frozen=True, kw_only=True)
class Login:
    """Check credentials and open a session (or start the 2FA step).

    Attributes:
        email: Address.
        password: Plaintext password (not strength-checked at login).
        ip_address: Client address (device fingerprint input).
        user_agent: Client User-Agent (device fingerprint input).
    """

    email: Email
    password: str
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class LoginWithTwoFactor:
    """Complete a login with the pending-2FA token and a TOTP code."""

    temp_token: str
    code: SixDigitCode
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Re-sign the access token of the session holding this refresh token."""

    refresh_token: str
    ip_address: str | None = None


@dataclass(frozen=True, kw_only=True)
class GoogleLogin:
    """Sign in with a Google-asserted identity (find, link or create)."""

    profile: GoogleProfile
    ip_address: str | None = None
    user_agent: str | None = None
