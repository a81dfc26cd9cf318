"""Stub email service that logs instead of sending.

Used in development and tests. The code is never written to the log; only
its purpose and lifetime are, so log shipping cannot leak credentials.
"""

from src.domain.enums import VerificationPurpose
from src.domain.protocols.logger_protocol import LoggerProtocol


class StubEmailService:
    """EmailProtocol implementation backed by the structured logger.

    Attributes:
        sent: In-memory outbox (recipient, purpose, code), inspected by tests.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self.sent: list[tuple[str, str, str]] = []

    async def send_verification_code(
        self,
        to_email: str,
        code: str,
        purpose: VerificationPurpose,
        expires_in_seconds: int,
    ) -> None:
        self.sent.append((to_email, purpose.value, code))
        self._logger.info(
            "email_verification_code_sent",
            purpose=purpose.value,
            expires_in_seconds=expires_in_seconds,
        )

    async def send_password_changed_notification(self, to_email: str) -> None:
        self.sent.append((to_email, "PASSWORD_CHANGED", ""))
        self._logger.info("email_password_changed_sent")
