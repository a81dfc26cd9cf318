"""TOTP two-factor service (adapter).

Implements TotpProtocol with pyotp (RFC 6238: SHA1, 6 digits, 30 second
period by default) and renders enrollment URIs as PNG QR codes with qrcode.

Codes are accepted for the current period and ``window`` adjacent periods on
either side, measured against the injected clock.
"""

import base64
import io

import pyotp
import qrcode

from src.core.clock import Clock, SystemClock
from src.domain.protocols import TotpEnrollment

# 32 base32 characters = 20 bytes = 160 bits
SECRET_LENGTH = 32


class PyOTPTotpService:
    """Time-based one-time password engine.

    Usage:
        from src.core.container import get_totp_service

        totp = get_totp_service()
        secret = totp.generate_secret()
        enrollment = totp.build_enrollment("user@example.com", secret)
        totp.verify_code(secret, "123456")
    """

    def __init__(
        self,
        issuer: str,
        digits: int = 6,
        period: int = 30,
        window: int = 1,
        clock: Clock | None = None,
    ) -> None:
        self._issuer = issuer
        self._digits = digits
        self._period = period
        self._window = window
        self._clock = clock or SystemClock()

    def generate_secret(self) -> str:
        return pyotp.random_base32(length=SECRET_LENGTH)

    def build_enrollment_uri(self, email: str, secret: str) -> str:
        """Build the ``otpauth://totp/...`` URI authenticator apps scan."""
        return self._totp(secret).provisioning_uri(
            name=email, issuer_name=self._issuer
        )

    def render_qr_code(self, uri: str) -> str:
        """Render a URI as a PNG QR code.

        Returns:
            ``data:image/png;base64,...`` URL.
        """
        image = qrcode.make(uri)
        buffer = io.BytesIO()
        image.save(buffer)
        encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
        return f"data:image/png;base64,{encoded}"

    def build_enrollment(self, email: str, secret: str) -> TotpEnrollment:
        uri = self.build_enrollment_uri(email, secret)
        return TotpEnrollment(
            secret=secret, otpauth_url=uri, qr_code=self.render_qr_code(uri)
        )

    def current_code(self, secret: str) -> str:
        """Code for the current period (used by tests and diagnostics)."""
        return self._totp(secret).at(self._clock.now())

    def verify_code(self, secret: str, code: str) -> bool:
        """Check a submitted code.

        Args:
            secret: Base32 secret.
            code: Submitted code.

        Returns:
            True if the code matches the current period or one within the
            configured window. False for malformed input.
        """
        if len(code) != self._digits or not code.isdigit():
            return False
        return self._totp(secret).verify(
            code, for_time=self._clock.now(), valid_window=self._window
        )

    def _totp(self, secret: str) -> pyotp.TOTP:
        return pyotp.TOTP(secret, digits=self._digits, interval=self._period)
