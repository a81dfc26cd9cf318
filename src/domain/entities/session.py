"""Session domain entity for refresh-token-bound logins.

Pure business logic, no framework dependencies.

Invariant:
    A session is usable only while ``is_active`` and ``now < expires_at``.
    Refresh replaces the access token in place; the refresh token is stable
    for the lifetime of the session.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(slots=True, kw_only=True)
class Session:
    """Session domain entity.

    Attributes:
        id: Session identifier.
        account_id: Owning account.
        device_id: Device the session was created from.
        access_token: Most recently issued access token.
        refresh_token: Refresh token (unique, stable).
        ip_address: Origin address of the most recent use.
        user_agent: User agent string at creation.
        expires_at: Absolute expiry.
        last_used_at: Last refresh (or creation) time.
        is_active: False after logout or revocation.
        created_at: Creation time.
        device_name: Device summary, populated by listing queries only.
    """

    id: UUID
    account_id: UUID
    device_id: UUID
    access_token: str
    refresh_token: str
    expires_at: datetime
    ip_address: str | None = None
    user_agent: str | None = None
    last_used_at: datetime | None = None
    is_active: bool = True
    created_at: datetime | None = None
    device_name: str | None = None

    def is_usable(self, now: datetime) -> bool:
        """Check the session invariant.

        Args:
            now: Current time from the injected clock.

        Returns:
            bool: True if active and not yet expired.
        """
        return self.is_active and now < self.expires_at
