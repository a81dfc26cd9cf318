"""Resend verification code handler.

Flow:
1. Look up the account (missing: error)
2. Already verified: idempotent success, nothing sent
3. Throttle check + replace the code in one conditional write
4. Send the new code

Throttled requests fail and leave the current code valid.
"""

from src.application.commands.auth_commands import ResendVerification
from src.application.dtos import MessageResult
from src.application.errors import ApplicationError, AuthFailures
from src.core.result import Failure, Result, Success
from src.domain.enums import VerificationPurpose
from src.domain.protocols import (
    AccountRepository,
    EmailProtocol,
    LoggerProtocol,
    VerificationCodeRepository,
)

RESENT_MESSAGE = "A new verification code has been sent"
ALREADY_VERIFIED_MESSAGE = "Email already verified"


class ResendVerificationHandler:
    """Handler for ResendVerification command."""

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
        self, cmd: ResendVerification
    ) -> Result[MessageResult, ApplicationError]:
        account = await self._account_repo.find_by_email(cmd.email)
        if account is None:
            return Failure(error=AuthFailures.USER_NOT_FOUND)

        if account.is_verified:
            return Success(value=MessageResult(message=ALREADY_VERIFIED_MESSAGE))

        code = await self._code_repo.issue_unless_recent(
            cmd.email, VerificationPurpose.REGISTER, self._throttle_seconds
        )
        if code is None:
            self._logger.info(
                "verification_resend_throttled", account_id=str(account.id)
            )
            return Failure(error=AuthFailures.VERIFICATION_THROTTLED)

        await self._email_service.send_verification_code(
            cmd.email, code, VerificationPurpose.REGISTER, self._code_ttl_seconds
        )
        self._logger.info("verification_code_resent", account_id=str(account.id))
        return Success(value=MessageResult(message=RESENT_MESSAGE))
