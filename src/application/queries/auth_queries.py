"""Account, session and device queries (CQRS read operations).

Queries represent requests for information. They are immutable dataclasses
with question-like names. Queries NEVER change state.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetProfile:
    """Get the caller's public account view.

    Attributes:
        account_id: Authenticated account.
    """

    account_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetTwoFactorStatus:
    """Get the caller's 2FA enrollment state."""

    account_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListSessions:
    """List the caller's usable sessions.

    Attributes:
        account_id: Authenticated account.
        current_access_token: Bearer token of the request (marks the current
            session in the response).

    Example:
        >>> query = ListSessions(account_id=principal.id, current_access_token=token)
        >>> result = await handler.handle(query)
    """

    account_id: UUID
    current_access_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class ListDevices:
    """List the caller's active devices with live session counts."""

    account_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetVerificationCodeStatistics:
    """Aggregate counts of stored verification codes (administrative)."""
