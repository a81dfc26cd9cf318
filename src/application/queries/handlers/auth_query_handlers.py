"""Query handlers for profile, 2FA status, sessions, devices and codes."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.dtos import AccountSummary
from src.application.errors import ApplicationError, AuthFailures
from src.application.queries.auth_queries import (
    GetProfile,
    GetTwoFactorStatus,
    GetVerificationCodeStatistics,
    ListDevices,
    ListSessions,
)
from src.application.services.device_registry import DeviceRegistry
from src.core.clock import Clock
from src.core.result import Failure, Result, Success
from src.domain.entities.device import Device
from src.domain.protocols import (
    AccountRepository,
    SessionRepository,
    VerificationCodeRepository,
    VerificationCodeStatistics,
)


@dataclass(frozen=True, kw_only=True)
class TwoFactorStatus:
    """2FA enrollment state.

    ``has_secret`` with ``is_2fa_enabled`` False means setup was started
    but not yet confirmed.
    """

    is_2fa_enabled: bool
    has_secret: bool


@dataclass(frozen=True, kw_only=True)
class SessionView:
    """Session as shown to its owner (tokens are never exposed)."""

    id: UUID
    device_id: UUID
    device_name: str | None
    ip_address: str | None
    created_at: datetime | None
    last_used_at: datetime | None
    expires_at: datetime
    is_current: bool = False


class GetProfileHandler:
    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    async def handle(
        self, query: GetProfile
    ) -> Result[AccountSummary, ApplicationError]:
        account = await self._account_repo.find_by_id(query.account_id)
        if account is None:
            return Failure(error=AuthFailures.USER_NOT_FOUND)
        return Success(value=AccountSummary.from_account(account))


class GetTwoFactorStatusHandler:
    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    async def handle(
        self, query: GetTwoFactorStatus
    ) -> Result[TwoFactorStatus, ApplicationError]:
        account = await self._account_repo.find_by_id(query.account_id)
        if account is None:
            return Failure(error=AuthFailures.USER_NOT_FOUND)
        return Success(
            value=TwoFactorStatus(
                is_2fa_enabled=account.two_factor_enabled,
                has_secret=account.totp_secret is not None,
            )
        )


class ListSessionsHandler:
    """List usable sessions, most recently used first."""

    def __init__(self, session_repo: SessionRepository, clock: Clock) -> None:
        self._session_repo = session_repo
        self._clock = clock

    async def handle(
        self, query: ListSessions
    ) -> Result[list[SessionView], ApplicationError]:
        """Handle list sessions query.

        Args:
            query: ListSessions query with account_id and the request's token.

        Returns:
            Success(list[SessionView]). Never fails; an account with no
            sessions yields an empty list.
        """
        sessions = await self._session_repo.list_active(
            query.account_id, self._clock.now()
        )
        return Success(
            value=[
                SessionView(
                    id=session.id,
                    device_id=session.device_id,
                    device_name=session.device_name,
                    ip_address=session.ip_address,
                    created_at=session.created_at,
                    last_used_at=session.last_used_at,
                    expires_at=session.expires_at,
                    is_current=(
                        query.current_access_token is not None
                        and session.access_token == query.current_access_token
                    ),
                )
                for session in sessions
            ]
        )


class ListDevicesHandler:
    def __init__(self, device_registry: DeviceRegistry) -> None:
        self._device_registry = device_registry

    async def handle(
        self, query: ListDevices
    ) -> Result[list[Device], ApplicationError]:
        return Success(value=await self._device_registry.list_active(query.account_id))


class GetVerificationCodeStatisticsHandler:
    def __init__(self, code_repo: VerificationCodeRepository) -> None:
        self._code_repo = code_repo

    async def handle(
        self, query: GetVerificationCodeStatistics
    ) -> Result[VerificationCodeStatistics, ApplicationError]:
        return Success(value=await self._code_repo.statistics())
