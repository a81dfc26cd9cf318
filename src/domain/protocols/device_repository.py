"""DeviceRepository protocol for tracked device persistence."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.device import Device


class DeviceRepository(Protocol):
    """Device repository protocol (port).

    Devices are never deleted; revocation flips ``is_active``.
    """

    async def find_by_fingerprint(
        self, account_id: UUID, fingerprint: str
    ) -> Device | None:
        """Find the account's device with this fingerprint (active or not)."""
        ...

    async def find_by_id(self, account_id: UUID, device_id: UUID) -> Device | None:
        """Find a device owned by the account.

        Returns:
            Device if it exists and belongs to the account, None otherwise.
        """
        ...

    async def create(self, device: Device) -> Device:
        """Insert a new device.

        Returns:
            The stored device. When a concurrent login already inserted the
            same (account, fingerprint), that row is returned instead.
        """
        ...

    async def record_activity(
        self, device_id: UUID, ip_address: str | None, at: datetime
    ) -> None:
        """Update last-seen address and activity timestamp, reactivating the device."""
        ...

    async def touch(self, device_id: UUID, at: datetime) -> None:
        """Update the activity timestamp only."""
        ...

    async def deactivate(self, device_id: UUID) -> None:
        """Set ``is_active`` to False. Idempotent."""
        ...

    async def list_active(self, account_id: UUID, now: datetime) -> list[Device]:
        """Active devices, most recently active first, with live session counts."""
        ...
