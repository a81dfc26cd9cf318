"""TOTP two-factor enrollment commands.

Enrollment is two-step: SetupTwoFactor stores a pending secret, and
VerifyTwoFactor turns 2FA on once the user proves the authenticator works.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.types import SixDigitCode


@dataclass(frozen=True, kw_only=True)
class SetupTwoFactor:
    account_id: UUID


@dataclass(frozen=True, kw_only=True)
class VerifyTwoFactor:
    account_id: UUID
    code: SixDigitCode


@dataclass(frozen=True, kw_only=True)
class DisableTwoFactor:
    """Disable 2FA; requires the password and a current TOTP code."""

    account_id: UUID
    password: str
    code: SixDigitCode
