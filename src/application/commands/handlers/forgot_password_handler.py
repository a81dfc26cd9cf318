"""Forgot password handler.

Always returns the same message, whether or not the address has an account,
the account is OAuth-only, blocked, or the request was throttled. A code is
only issued and sent for an existing, password-bearing, unblocked account
whose previous reset code is older than the throttle window.
"""

from src.application.commands.auth_commands import ForgotPassword
from src.application.dtos import MessageResult
from src.application.errors import ApplicationError
from src.core.result import Result, Success
from src.domain.enums import VerificationPurpose
from src.domain.protocols import (
    AccountRepository,
    EmailProtocol,
    LoggerProtocol,
    VerificationCodeRepository,
)

GENERIC_MESSAGE = "If an account exists for this email, a reset code has been sent"


class ForgotPasswordHandler:
    """Handler for ForgotPassword command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        code_repo: VerificationCodeRepository,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        code_ttl_seconds: int = 300,
        throttle_seconds: int = 60,
    ) -> None:
        self._account_repo = account_repo
        self._code_repo = code_repo
        self._email_service = email_service
        self._logger = logger
        self._code_ttl_seconds = code_ttl_seconds
        self._throttle_seconds = throttle_seconds

    async def handle(
        self, cmd: ForgotPassword
    ) -> Result[MessageResult, ApplicationError]:
        """Handle ForgotPassword command.

        Returns:
            Success(MessageResult) with the generic message, always.
        """
        generic = Success(value=MessageResult(message=GENERIC_MESSAGE))

        account = await self._account_repo.find_by_email(cmd.email)
        if account is None or not account.has_password or account.is_blocked:
            self._logger.info("password_reset_skipped")
            return generic

        code = await self._code_repo.issue_unless_recent(
            cmd.email, VerificationPurpose.RESET_PASSWORD, self._throttle_seconds
        )
        if code is None:
            self._logger.warning(
                "password_reset_throttled", account_id=str(account.id)
            )
            return generic

        await self._email_service.send_verification_code(
            cmd.email,
            code,
            VerificationPurpose.RESET_PASSWORD,
            self._code_ttl_seconds,
        )
        self._logger.info("password_reset_code_sent", account_id=str(account.id))
        return generic
