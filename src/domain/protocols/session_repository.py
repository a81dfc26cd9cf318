"""SessionRepository protocol for refresh-token bound sessions.

A session is usable only while ``is_active`` and ``now < expires_at``.
Rows are never deleted; every revocation path flips ``is_active``.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.session import Session


class SessionRepository(Protocol):
    """Session store protocol (port).

    Methods:
        create: Insert a new session
        find_valid_by_refresh_token: Uniform lookup (None for any invalid case)
        rotate_access_token: Replace access token in place
        deactivate: Logout one session
        deactivate_all: Logout every session of an account
        deactivate_for_device: Logout every session of one device
        list_active: Usable sessions of an account
    """

    async def create(self, session: Session) -> Session:
        """Insert a new session.

        Returns:
            The stored session.
        """
        ...

    async def find_valid_by_refresh_token(
        self, refresh_token: str, now: datetime
    ) -> Session | None:
        """Find a usable session by exact refresh token match.

        Missing, inactive and expired sessions all yield None; callers
        cannot tell the cases apart.
        """
        ...

    async def rotate_access_token(
        self,
        session_id: UUID,
        access_token: str,
        ip_address: str | None,
        at: datetime,
    ) -> None:
        """Store a new access token, origin address and last-used timestamp.

        The refresh token is left unchanged.
        """
        ...

    async def deactivate(self, refresh_token: str, account_id: UUID) -> int:
        """Deactivate the account's session holding this refresh token.

        Returns:
            Number of sessions flipped (0 when unknown or already inactive).
        """
        ...

    async def deactivate_all(self, account_id: UUID) -> int:
        """Deactivate every active session of the account in one statement."""
        ...

    async def deactivate_for_device(self, account_id: UUID, device_id: UUID) -> int:
        """Deactivate every active session bound to the device."""
        ...

    async def list_active(self, account_id: UUID, now: datetime) -> list[Session]:
        """Usable sessions, most recently used first, with device names."""
        ...
