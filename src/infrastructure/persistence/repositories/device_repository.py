"""DeviceRepository - SQLAlchemy implementation of DeviceRepository protocol.

Devices are keyed by (account_id, fingerprint). Revocation flips
``is_active``; rows are never deleted.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import and_, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.device import Device
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.device import Device as DeviceModel
from src.infrastructure.persistence.models.session import Session as SessionModel


class DeviceRepository:
    """SQLAlchemy implementation of DeviceRepository protocol.

    Attributes:
        session: SQLAlchemy async session.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_fingerprint(
        self, account_id: UUID, fingerprint: str
    ) -> Device | None:
        stmt = select(DeviceModel).where(
            and_(
                DeviceModel.account_id == account_id,
                DeviceModel.fingerprint == fingerprint,
            )
        )
        result = await self.session.execute(stmt)
        device_model = result.scalar_one_or_none()
        return self._to_domain(device_model) if device_model else None

    async def find_by_id(self, account_id: UUID, device_id: UUID) -> Device | None:
        stmt = select(DeviceModel).where(
            and_(
                DeviceModel.id == device_id,
                DeviceModel.account_id == account_id,
            )
        )
        result = await self.session.execute(stmt)
        device_model = result.scalar_one_or_none()
        return self._to_domain(device_model) if device_model else None

    async def create(self, device: Device) -> Device:
        """Insert a new device.

        A concurrent login from the same fingerprint may win the insert; the
        unique constraint rejects ours and the winner's row is returned.
        """
        device_model = DeviceModel(
            id=device.id,
            account_id=device.account_id,
            fingerprint=device.fingerprint,
            device_name=device.device_name,
            device_type=device.device_type,
            browser=device.browser,
            os=device.os,
            ip_address=device.ip_address,
            last_active_at=device.last_active_at,
            is_active=device.is_active,
        )
        self.session.add(device_model)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            existing = await self.find_by_fingerprint(
                device.account_id, device.fingerprint
            )
            if existing is None:
                raise
            return existing
        return self._to_domain(device_model)

    async def record_activity(
        self, device_id: UUID, ip_address: str | None, at: datetime
    ) -> None:
        stmt = (
            update(DeviceModel)
            .where(DeviceModel.id == device_id)
            .values(ip_address=ip_address, last_active_at=at, is_active=True)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def touch(self, device_id: UUID, at: datetime) -> None:
        stmt = (
            update(DeviceModel)
            .where(DeviceModel.id == device_id)
            .values(last_active_at=at)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def deactivate(self, device_id: UUID) -> None:
        stmt = (
            update(DeviceModel)
            .where(DeviceModel.id == device_id)
            .values(is_active=False)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def list_active(self, account_id: UUID, now: datetime) -> list[Device]:
        """Active devices with their count of usable sessions.

        Args:
            account_id: Owning account.
            now: Sessions expiring at or before this instant are not counted.

        Returns:
            Devices ordered by last activity, newest first.
        """
        live_sessions = (
            select(
                SessionModel.device_id,
                func.count(SessionModel.id).label("session_count"),
            )
            .where(
                and_(
                    SessionModel.account_id == account_id,
                    SessionModel.is_active.is_(True),
                    SessionModel.expires_at > now,
                )
            )
            .group_by(SessionModel.device_id)
            .subquery()
        )
        stmt = (
            select(DeviceModel, func.coalesce(live_sessions.c.session_count, 0))
            .outerjoin(live_sessions, live_sessions.c.device_id == DeviceModel.id)
            .where(
                and_(
                    DeviceModel.account_id == account_id,
                    DeviceModel.is_active.is_(True),
                )
            )
            .order_by(DeviceModel.last_active_at.desc())
        )
        result = await self.session.execute(stmt)

        devices = []
        for device_model, session_count in result.all():
            device = self._to_domain(device_model)
            device.active_session_count = int(session_count)
            devices.append(device)
        return devices

    def _to_domain(self, device_model: DeviceModel) -> Device:
        return Device(
            id=device_model.id,
            account_id=device_model.account_id,
            fingerprint=device_model.fingerprint,
            device_name=device_model.device_name,
            device_type=device_model.device_type,
            browser=device_model.browser,
            os=device_model.os,
            ip_address=device_model.ip_address,
            last_active_at=as_utc(device_model.last_active_at),
            is_active=device_model.is_active,
            created_at=as_utc(device_model.created_at),
        )
