"""Security infrastructure adapters.

- Password hashing (bcrypt)
- Access, refresh and pending-2FA tokens (PyJWT)
- TOTP two-factor codes and QR enrollment (pyotp, qrcode)
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.totp_service import PyOTPTotpService

__all__ = [
    "BcryptPasswordService",
    "JWTService",
    "PyOTPTotpService",
]
