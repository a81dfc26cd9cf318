"""Administrative commands (permission-gated routes)."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import AccountStatus


@dataclass(frozen=True, kw_only=True)
class UpdateAccountStatus:
    """Activate or block an account. Blocking revokes every session."""

    account_id: UUID
    status: AccountStatus
    actor_id: UUID


@dataclass(frozen=True, kw_only=True)
class PurgeExpiredCodes:
    """Delete expired verification codes."""

    actor_id: UUID
