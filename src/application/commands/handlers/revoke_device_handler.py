"""Revoke device handler.

Deactivates every session bound to the device, then the device itself.
Devices of other accounts are reported as not found.
"""

from src.application.commands.session_commands import RevokeDevice
from src.application.dtos import MessageResult
from src.application.errors import ApplicationError, AuthFailures
from src.application.services.device_registry import DeviceRegistry
from src.core.result import Failure, Result, Success
from src.domain.protocols import DeviceRepository, LoggerProtocol, SessionRepository


class RevokeDeviceHandler:
    """Handler for RevokeDevice command."""

    def __init__(
        self,
        device_repo: DeviceRepository,
        session_repo: SessionRepository,
        device_registry: DeviceRegistry,
        logger: LoggerProtocol,
    ) -> None:
        self._device_repo = device_repo
        self._session_repo = session_repo
        self._device_registry = device_registry
        self._logger = logger

    async def handle(self, cmd: RevokeDevice) -> Result[MessageResult, ApplicationError]:
        device = await self._device_repo.find_by_id(cmd.account_id, cmd.device_id)
        if device is None:
            return Failure(error=AuthFailures.DEVICE_NOT_FOUND)

        count = await self._session_repo.deactivate_for_device(
            cmd.account_id, cmd.device_id
        )
        await self._device_registry.deactivate(cmd.device_id)

        self._logger.info(
            "device_revoked",
            account_id=str(cmd.account_id),
            device_id=str(cmd.device_id),
            sessions_revoked=count,
        )
        return Success(value=MessageResult(message="Device revoked", count=count))
