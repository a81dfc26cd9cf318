"""Session issuer service.

The common tail of every successful login (password, two-factor and Google):

1. Identify or create the device
2. Sign access + refresh tokens whose claims carry the device id
3. Create the session bound to the refresh token

The session expires together with its refresh token.
"""

from uuid_extensions import uuid7

from src.application.dtos import AuthTokens, IssuedSession
from src.application.services.device_registry import DeviceRegistry
from src.core.clock import Clock
from src.domain.entities.account import Account
from src.domain.entities.session import Session
from src.domain.protocols import (
    LoggerProtocol,
    SessionRepository,
    TokenClaims,
    TokenServiceProtocol,
)


class SessionIssuer:
    """Issues device-bound sessions.

    Usage:
        issued = await session_issuer.issue(account, ip_address, user_agent)
        issued.tokens.access_token
    """

    def __init__(
        self,
        device_registry: DeviceRegistry,
        session_repo: SessionRepository,
        token_service: TokenServiceProtocol,
        clock: Clock,
        logger: LoggerProtocol,
    ) -> None:
        self._device_registry = device_registry
        self._session_repo = session_repo
        self._token_service = token_service
        self._clock = clock
        self._logger = logger

    async def issue(
        self,
        account: Account,
        ip_address: str | None,
        user_agent: str | None,
    ) -> IssuedSession:
        """Create a device-bound session for an authenticated account.

        Args:
            account: Account that passed every credential check.
            ip_address: Client address.
            user_agent: Raw User-Agent header.

        Returns:
            IssuedSession: Token pair plus device and session ids.
        """
        device = await self._device_registry.identify_or_create(
            account.id, ip_address, user_agent
        )

        claims = TokenClaims(
            account_id=account.id,
            email=account.email,
            role=account.role_name,
            device_id=device.id,
        )
        access_token = self._token_service.sign_access(claims)
        refresh_token = self._token_service.sign_refresh(claims)

        now = self._clock.now()
        session = await self._session_repo.create(
            Session(
                id=uuid7(),
                account_id=account.id,
                device_id=device.id,
                access_token=access_token,
                refresh_token=refresh_token,
                expires_at=self._token_service.refresh_expires_at(now),
                ip_address=ip_address,
                user_agent=user_agent,
                last_used_at=now,
                is_active=True,
                created_at=now,
            )
        )

        self._logger.info(
            "session_created",
            account_id=str(account.id),
            device_id=str(device.id),
            session_id=str(session.id),
        )

        return IssuedSession(
            tokens=AuthTokens(
                access_token=access_token,
                refresh_token=refresh_token,
                expires_in=self._token_service.access_expires_in,
            ),
            device_id=device.id,
            session_id=session.id,
        )
