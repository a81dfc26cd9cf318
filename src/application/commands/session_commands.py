"""Session and device commands.

Every command is scoped to the authenticated account; no command can touch
another account's sessions or devices.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class Logout:
    """Deactivate the caller's session holding this refresh token (idempotent)."""

    account_id: UUID
    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class LogoutAllDevices:
    """Deactivate every session of the account."""

    account_id: UUID


@dataclass(frozen=True, kw_only=True)
class RevokeDevice:
    """Deactivate a device and all of its sessions."""

    account_id: UUID
    device_id: UUID
