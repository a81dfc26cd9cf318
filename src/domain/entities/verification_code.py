"""Verification code domain entity.

Ephemeral record: at most one live code exists per (email, purpose). The code
itself is the credential, so no account reference is stored.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import VerificationPurpose


@dataclass(slots=True, kw_only=True)
class VerificationCode:
    """One-time six-digit code bound to an address and purpose.

    Attributes:
        id: Row identifier.
        email: Address the code was sent to.
        code: Six-digit decimal string.
        purpose: Use case the code is valid for.
        expires_at: Absolute expiry.
        created_at: Issue time (drives resend throttling).
    """

    id: UUID
    email: str
    code: str
    purpose: VerificationPurpose
    expires_at: datetime
    created_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Check expiry against the supplied time.

        Args:
            now: Current time from the injected clock.

        Returns:
            bool: True once ``now`` reaches ``expires_at``.
        """
        return now >= self.expires_at
