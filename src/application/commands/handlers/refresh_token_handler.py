"""Refresh access token handler.

Flow:
1. Verify the refresh token signature and class
2. Find the usable session holding it (missing, inactive and expired look
   the same)
3. Touch the device
4. Re-sign only the access token with the same claims
5. Store the new access token, origin address and last-used time

The refresh token is not single-use: concurrent refreshes with the same
token all succeed and the stored refresh token never changes.
"""

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.dtos import RefreshResult
from src.application.errors import ApplicationError, AuthFailures
from src.application.services.device_registry import DeviceRegistry
from src.core.clock import Clock
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenType
from src.domain.protocols import (
    LoggerProtocol,
    SessionRepository,
    TokenClaims,
    TokenServiceProtocol,
)


class RefreshAccessTokenHandler:
    """Handler for RefreshAccessToken command."""

    def __init__(
        self,
        session_repo: SessionRepository,
        device_registry: DeviceRegistry,
        token_service: TokenServiceProtocol,
        clock: Clock,
        logger: LoggerProtocol,
    ) -> None:
        self._session_repo = session_repo
        self._device_registry = device_registry
        self._token_service = token_service
        self._clock = clock
        self._logger = logger

    async def handle(
        self, cmd: RefreshAccessToken
    ) -> Result[RefreshResult, ApplicationError]:
        """Handle RefreshAccessToken command.

        Returns:
            Success(RefreshResult) with a new access token.
            Failure(INVALID_TOKEN) for every invalid case.
        """
        match self._token_service.verify(cmd.refresh_token, TokenType.REFRESH):
            case Failure():
                return Failure(error=AuthFailures.INVALID_TOKEN)
            case Success(value=payload):
                pass

        now = self._clock.now()
        session = await self._session_repo.find_valid_by_refresh_token(
            cmd.refresh_token, now
        )
        if session is None:
            return Failure(error=AuthFailures.INVALID_TOKEN)

        try:
            claims = TokenClaims.from_payload(payload)
        except (KeyError, ValueError):
            return Failure(error=AuthFailures.INVALID_TOKEN)

        await self._device_registry.touch(session.device_id)

        access_token = self._token_service.sign_access(claims)
        await self._session_repo.rotate_access_token(
            session.id, access_token, cmd.ip_address, now
        )

        self._logger.info(
            "access_token_refreshed",
            account_id=str(session.account_id),
            session_id=str(session.id),
        )
        return Success(
            value=RefreshResult(
                access_token=access_token,
                refresh_token=cmd.refresh_token,
                expires_in=self._token_service.access_expires_in,
            )
        )
