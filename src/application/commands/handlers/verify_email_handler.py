"""Email verification handler.

Flow:
1. Consume the registration code
2. Code rejected: succeed idempotently if the account is already verified
   (the first verification deleted the code), otherwise fail
3. Look up the account
4. Already verified: drop stray codes, succeed idempotently
5. Otherwise mark verified, drop codes, succeed
"""

from src.application.commands.auth_commands import VerifyEmail
from src.application.dtos import MessageResult
from src.application.errors import ApplicationError, AuthFailures
from src.core.clock import Clock
from src.core.result import Failure, Result, Success
from src.domain.enums import VerificationPurpose
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    VerificationCodeRepository,
)

VERIFIED_MESSAGE = "Email verified successfully"
ALREADY_VERIFIED_MESSAGE = "Email already verified"


class VerifyEmailHandler:
    """Handler for VerifyEmail command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        code_repo: VerificationCodeRepository,
        clock: Clock,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._code_repo = code_repo
        self._clock = clock
        self._logger = logger

    async def handle(self, cmd: VerifyEmail) -> Result[MessageResult, ApplicationError]:
        """Handle VerifyEmail command.

        Returns:
            Success(MessageResult) when verified now or earlier.
            Failure(INVALID_VERIFICATION_CODE) for a wrong or expired code.
            Failure(USER_NOT_FOUND) if the account disappeared.
        """
        purpose = VerificationPurpose.REGISTER
        if not await self._code_repo.consume(cmd.email, cmd.code, purpose):
            account = await self._account_repo.find_by_email(cmd.email)
            if account is not None and account.is_verified:
                return Success(value=MessageResult(message=ALREADY_VERIFIED_MESSAGE))
            self._logger.info("email_verification_failed", reason="invalid_code")
            return Failure(error=AuthFailures.INVALID_VERIFICATION_CODE)

        account = await self._account_repo.find_by_email(cmd.email)
        if account is None:
            return Failure(error=AuthFailures.USER_NOT_FOUND)

        if account.is_verified:
            await self._code_repo.invalidate(cmd.email, purpose)
            return Success(value=MessageResult(message=ALREADY_VERIFIED_MESSAGE))

        account.mark_verified(self._clock.now())
        await self._account_repo.update(account)
        await self._code_repo.invalidate(cmd.email, purpose)

        self._logger.info("email_verified", account_id=str(account.id))
        return Success(value=MessageResult(message=VERIFIED_MESSAGE))
