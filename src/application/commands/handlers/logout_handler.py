"""Logout handlers: one session, or every session of the account.

Both are idempotent; unknown or already inactive sessions are not errors.
"""

from src.application.commands.session_commands import Logout, LogoutAllDevices
from src.application.dtos import MessageResult
from src.application.errors import ApplicationError
from src.core.result import Result, Success
from src.domain.protocols import LoggerProtocol, SessionRepository


class LogoutHandler:
    """Handler for Logout command."""

    def __init__(self, session_repo: SessionRepository, logger: LoggerProtocol) -> None:
        self._session_repo = session_repo
        self._logger = logger

    async def handle(self, cmd: Logout) -> Result[MessageResult, ApplicationError]:
        count = await self._session_repo.deactivate(cmd.refresh_token, cmd.account_id)
        self._logger.info(
            "logout", account_id=str(cmd.account_id), sessions_revoked=count
        )
        return Success(value=MessageResult(message="Logged out successfully", count=count))


class LogoutAllDevicesHandler:
    """Handler for LogoutAllDevices command."""

    def __init__(self, session_repo: SessionRepository, logger: LoggerProtocol) -> None:
        self._session_repo = session_repo
        self._logger = logger

    async def handle(
        self, cmd: LogoutAllDevices
    ) -> Result[MessageResult, ApplicationError]:
        count = await self._session_repo.deactivate_all(cmd.account_id)
        self._logger.info(
            "logout_all_devices",
            account_id=str(cmd.account_id),
            sessions_revoked=count,
        )
        return Success(
            value=MessageResult(message="Logged out from all devices", count=count)
        )
