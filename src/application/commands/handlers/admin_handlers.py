"""Administrative handlers behind permission-gated routes."""

from src.application.commands.admin_commands import (
    PurgeExpiredCodes,
    UpdateAccountStatus,
)
from src.application.dtos import MessageResult
from src.application.errors import ApplicationError, AuthFailures
from src.core.result import Failure, Result, Success
from src.domain.enums import AccountStatus
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    SessionRepository,
    VerificationCodeRepository,
)


class UpdateAccountStatusHandler:
    """Set ACTIVE or BLOCKED. Blocking revokes every session of the account."""

    def __init__(
        self,
        account_repo: AccountRepository,
        session_repo: SessionRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._session_repo = session_repo
        self._logger = logger

    async def handle(
        self, cmd: UpdateAccountStatus
    ) -> Result[MessageResult, ApplicationError]:
        if not await self._account_repo.set_status(cmd.account_id, cmd.status):
            return Failure(error=AuthFailures.USER_NOT_FOUND)

        revoked = 0
        if cmd.status == AccountStatus.BLOCKED:
            revoked = await self._session_repo.deactivate_all(cmd.account_id)

        self._logger.info(
            "account_status_changed",
            account_id=str(cmd.account_id),
            actor_id=str(cmd.actor_id),
            status=cmd.status.value,
            sessions_revoked=revoked,
        )
        return Success(
            value=MessageResult(
                message=f"Account status set to {cmd.status.value}", count=revoked
            )
        )


class PurgeExpiredCodesHandler:
    """Delete expired verification codes."""

    def __init__(
        self,
        code_repo: VerificationCodeRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._code_repo = code_repo
        self._logger = logger

    async def handle(
        self, cmd: PurgeExpiredCodes
    ) -> Result[MessageResult, ApplicationError]:
        purged = await self._code_repo.purge_expired()
        self._logger.info(
            "verification_codes_purged", actor_id=str(cmd.actor_id), count=purged
        )
        return Success(
            value=MessageResult(message="Expired codes purged", count=purged)
        )
