"""Device registry service.

Recognizes returning devices and records new ones. A device is identified by
a SHA-256 fingerprint of (account, browser family, OS family, origin
address); versions are excluded so browser updates keep the same device.

Architecture:
    - Application service (uses repository and parser ports)
    - Shared by the login flows and the device/session management handlers

Usage:
    registry = DeviceRegistry(device_repo, device_parser, clock, logger)
    device = await registry.identify_or_create(account.id, ip, user_agent)
"""

from uuid import UUID

from uuid_extensions import uuid7

from src.core.clock import Clock
from src.domain.entities.device import Device, derive_fingerprint
from src.domain.protocols import (
    DeviceParserProtocol,
    DeviceRepository,
    LoggerProtocol,
)


class DeviceRegistry:
    """Identify-or-create, activity tracking and deactivation of devices."""

    def __init__(
        self,
        device_repo: DeviceRepository,
        device_parser: DeviceParserProtocol,
        clock: Clock,
        logger: LoggerProtocol,
    ) -> None:
        self._device_repo = device_repo
        self._device_parser = device_parser
        self._clock = clock
        self._logger = logger

    async def identify_or_create(
        self,
        account_id: UUID,
        ip_address: str | None,
        user_agent: str | None,
    ) -> Device:
        """Return the device for this fingerprint, creating it on first sight.

        A known device gets its last-seen address and activity timestamp
        refreshed (and is reactivated if it had been revoked).

        Args:
            account_id: Authenticating account.
            ip_address: Client address.
            user_agent: Raw User-Agent header.

        Returns:
            Device: Existing or newly created device.
        """
        details = self._device_parser.parse(user_agent or "")
        fingerprint = derive_fingerprint(
            account_id, details.browser_name, details.os_name, ip_address
        )
        now = self._clock.now()

        existing = await self._device_repo.find_by_fingerprint(account_id, fingerprint)
        if existing is not None:
            await self._device_repo.record_activity(existing.id, ip_address, now)
            existing.ip_address = ip_address
            existing.last_active_at = now
            existing.is_active = True
            return existing

        device = await self._device_repo.create(
            Device(
                id=uuid7(),
                account_id=account_id,
                fingerprint=fingerprint,
                device_name=details.device_name,
                device_type=details.device_type,
                browser=details.browser,
                os=details.os,
                ip_address=ip_address,
                last_active_at=now,
                is_active=True,
                created_at=now,
            )
        )
        self._logger.info(
            "device_registered",
            account_id=str(account_id),
            device_id=str(device.id),
            device_type=device.device_type,
        )
        return device

    async def touch(self, device_id: UUID) -> None:
        """Update the device's activity timestamp only."""
        await self._device_repo.touch(device_id, self._clock.now())

    async def deactivate(self, device_id: UUID) -> None:
        await self._device_repo.deactivate(device_id)

    async def list_active(self, account_id: UUID) -> list[Device]:
        """Active devices, most recently active first, with session counts."""
        return await self._device_repo.list_active(account_id, self._clock.now())
