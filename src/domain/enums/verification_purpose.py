"""Purpose tag for one-time verification codes.

A code issued for one purpose can never be consumed for another, and
codes for different purposes never invalidate each other.
"""

from enum import Enum


class VerificationPurpose(str, Enum):
    """Verification code use cases."""

    REGISTER = "REGISTER"
    RESET_PASSWORD = "RESET_PASSWORD"
