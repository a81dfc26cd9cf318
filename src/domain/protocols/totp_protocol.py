"""TOTP two-factor protocol (port).

Infrastructure implements this with pyotp and qrcode (PyOTPTotpService).
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True, kw_only=True)
class TotpEnrollment:
    """Material returned by Setup2FA.

    Attributes:
        secret: Base32 secret (manual entry).
        otpauth_url: otpauth:// enrollment URI.
        qr_code: PNG QR code of the URI as a data URL.
    """

    secret: str
    otpauth_url: str
    qr_code: str


class TotpProtocol(Protocol):
    """Time-based one-time password engine."""

    def generate_secret(self) -> str:
        """Return a new 160-bit base32 secret."""
        ...

    def build_enrollment(self, email: str, secret: str) -> TotpEnrollment:
        """Build the enrollment URI and its scannable QR payload."""
        ...

    def verify_code(self, secret: str, code: str) -> bool:
        """Check a code against the current period and the adjacent window."""
        ...
