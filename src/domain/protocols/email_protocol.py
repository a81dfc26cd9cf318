"""EmailProtocol - Port for email delivery.

The authentication flows only need "send this code to this address" and a
security notification after a password reset.
"""

from typing import Protocol

from src.domain.enums import VerificationPurpose


class EmailProtocol(Protocol):
    """Email service protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.
    """

    async def send_verification_code(
        self,
        to_email: str,
        code: str,
        purpose: VerificationPurpose,
        expires_in_seconds: int,
    ) -> None:
        """Send a one-time code.

        Args:
            to_email: Recipient address.
            code: Six-digit code.
            purpose: Registration or password reset.
            expires_in_seconds: Code lifetime, shown to the user.
        """
        ...

    async def send_password_changed_notification(self, to_email: str) -> None:
        """Notify the owner that the password was reset.

        Args:
            to_email: Recipient address.
        """
        ...
