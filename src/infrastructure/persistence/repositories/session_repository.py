"""SessionRepository - SQLAlchemy implementation of SessionRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Session entities and database Session models.

This repository handles:
- Session creation at login
- Uniform refresh-token validation (missing, inactive and expired look alike)
- In-place access token rotation
- Single, per-device and per-account deactivation (bulk UPDATE statements)

Rows are never deleted; every revocation path flips ``is_active``.
"""

from datetime import datetime
from typing import Any, cast
from uuid import UUID

from sqlalchemy import and_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.session import Session
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.device import Device as DeviceModel
from src.infrastructure.persistence.models.session import Session as SessionModel


class SessionRepository:
    """SQLAlchemy implementation of SessionRepository protocol.

    This class does NOT inherit from SessionRepository protocol
    (Protocol uses structural typing).

    Attributes:
        _session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as db_session:
        ...     repo = SessionRepository(db_session)
        ...     session = await repo.find_valid_by_refresh_token(token, now)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create(self, session: Session) -> Session:
        """Insert a new session.

        Args:
            session: Session entity to persist.

        Returns:
            The stored session.
        """
        session_model = SessionModel(
            id=session.id,
            account_id=session.account_id,
            device_id=session.device_id,
            access_token=session.access_token,
            refresh_token=session.refresh_token,
            ip_address=session.ip_address,
            user_agent=session.user_agent,
            expires_at=session.expires_at,
            last_used_at=session.last_used_at,
            is_active=session.is_active,
        )
        self._session.add(session_model)
        await self._session.commit()
        return self._to_domain(session_model)

    async def find_valid_by_refresh_token(
        self, refresh_token: str, now: datetime
    ) -> Session | None:
        """Find a usable session by exact refresh token.

        The activity and expiry conditions are part of the query, so an
        inactive or expired session is indistinguishable from a missing one.

        Args:
            refresh_token: Refresh token presented by the client.
            now: Current time from the injected clock.

        Returns:
            Session if usable, None otherwise.
        """
        stmt = select(SessionModel).where(
            and_(
                SessionModel.refresh_token == refresh_token,
                SessionModel.is_active.is_(True),
                SessionModel.expires_at > now,
            )
        )
        result = await self._session.execute(stmt)
        session_model = result.scalar_one_or_none()
        return self._to_domain(session_model) if session_model else None

    async def rotate_access_token(
        self,
        session_id: UUID,
        access_token: str,
        ip_address: str | None,
        at: datetime,
    ) -> None:
        stmt = (
            update(SessionModel)
            .where(SessionModel.id == session_id)
            .values(access_token=access_token, ip_address=ip_address, last_used_at=at)
        )
        await self._session.execute(stmt)
        await self._session.commit()

    async def deactivate(self, refresh_token: str, account_id: UUID) -> int:
        return await self._deactivate_where(
            SessionModel.refresh_token == refresh_token,
            SessionModel.account_id == account_id,
        )

    async def deactivate_all(self, account_id: UUID) -> int:
        """Deactivate every active session of the account.

        Single UPDATE: sessions created after the statement runs survive it.

        Returns:
            Number of sessions deactivated.
        """
        return await self._deactivate_where(SessionModel.account_id == account_id)

    async def deactivate_for_device(self, account_id: UUID, device_id: UUID) -> int:
        return await self._deactivate_where(
            SessionModel.account_id == account_id,
            SessionModel.device_id == device_id,
        )

    async def list_active(self, account_id: UUID, now: datetime) -> list[Session]:
        """Usable sessions of an account, most recently used first.

        Args:
            account_id: Owning account.
            now: Current time from the injected clock.

        Returns:
            Sessions with ``device_name`` populated.
        """
        stmt = (
            select(SessionModel, DeviceModel.device_name)
            .join(DeviceModel, DeviceModel.id == SessionModel.device_id)
            .where(
                and_(
                    SessionModel.account_id == account_id,
                    SessionModel.is_active.is_(True),
                    SessionModel.expires_at > now,
                )
            )
            .order_by(SessionModel.last_used_at.desc(), SessionModel.created_at.desc())
        )
        result = await self._session.execute(stmt)

        sessions = []
        for session_model, device_name in result.all():
            session = self._to_domain(session_model)
            session.device_name = device_name
            sessions.append(session)
        return sessions

    async def _deactivate_where(self, *conditions: Any) -> int:
        stmt = (
            update(SessionModel)
            .where(and_(*conditions, SessionModel.is_active.is_(True)))
            .values(is_active=False)
        )
        result = await self._session.execute(stmt)
        await self._session.commit()
        return cast(Any, result).rowcount or 0

    # =========================================================================
    # Mapping methods
    # =========================================================================

    def _to_domain(self, model: SessionModel) -> Session:
        """Convert database model to domain Session."""
        return Session(
            id=model.id,
            account_id=model.account_id,
            device_id=model.device_id,
            access_token=model.access_token,
            refresh_token=model.refresh_token,
            expires_at=as_utc(model.expires_at),  # type: ignore[arg-type]
            ip_address=model.ip_address,
            user_agent=model.user_agent,
            last_used_at=as_utc(model.last_used_at),
            is_active=model.is_active,
            created_at=as_utc(model.created_at),
        )
