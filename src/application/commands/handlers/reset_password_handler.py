"""Reset password handler.

Flow:
1. Consume the reset code
2. Look up the account
3. Reject OAuth-only accounts (nothing to reset) and blocked accounts
4. Hash and store the new password
5. Invalidate the code
6. Deactivate every session of the account
7. Notify the owner by email

Step 6 is the security-critical cascade: a reset logs out every device.
"""

import asyncio

from src.application.commands.auth_commands import ResetPassword
from src.application.dtos import MessageResult
from src.application.errors import ApplicationError, AuthFailures
from src.core.result import Failure, Result, Success
from src.domain.enums import VerificationPurpose
from src.domain.protocols import (
    AccountRepository,
    EmailProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    SessionRepository,
    VerificationCodeRepository,
)

RESET_MESSAGE = "Password reset successfully. Please sign in again"


class ResetPasswordHandler:
    """Handler for ResetPassword command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        code_repo: VerificationCodeRepository,
        session_repo: SessionRepository,
        password_service: PasswordHashingProtocol,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._code_repo = code_repo
        self._session_repo = session_repo
        self._password_service = password_service
        self._email_service = email_service
        self._logger = logger

    async def handle(
        self, cmd: ResetPassword
    ) -> Result[MessageResult, ApplicationError]:
        purpose = VerificationPurpose.RESET_PASSWORD
        if not await self._code_repo.consume(cmd.email, cmd.code, purpose):
            self._logger.info("password_reset_failed", reason="invalid_code")
            return Failure(error=AuthFailures.INVALID_VERIFICATION_CODE)

        account = await self._account_repo.find_by_email(cmd.email)
        if account is None:
            return Failure(error=AuthFailures.USER_NOT_FOUND)
        if not account.has_password:
            return Failure(error=AuthFailures.PASSWORD_NOT_SET)
        if account.is_blocked:
            return Failure(error=AuthFailures.ACCOUNT_BLOCKED)

        account.password_hash = await asyncio.to_thread(
            self._password_service.hash_password, cmd.new_password
        )
        await self._account_repo.update(account)
        await self._code_repo.invalidate(cmd.email, purpose)

        revoked = await self._session_repo.deactivate_all(account.id)
        await self._email_service.send_password_changed_notification(cmd.email)

        self._logger.info(
            "password_reset_completed",
            account_id=str(account.id),
            sessions_revoked=revoked,
        )
        return Success(value=MessageResult(message=RESET_MESSAGE, count=revoked))
