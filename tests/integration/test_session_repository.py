"""Integration tests for SessionRepository and DeviceRepository.

Tests cover:
- Refresh-token lookup (active and unexpired only)
- Access token rotation in place
- Scoped, per-device and per-account deactivation
- Session and device listings

Architecture:
- Integration tests with a REAL database (in-memory SQLite)
- Uses the frozen clock for every timestamp
"""

from datetime import timedelta
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.domain.entities.account import Account
from src.domain.entities.device import Device
from src.domain.entities.session import Session
from src.infrastructure.persistence import models
from src.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from src.infrastructure.persistence.repositories.device_repository import (
    DeviceRepository,
)
from src.infrastructure.persistence.repositories.session_repository import (
    SessionRepository,
)


# =============================================================================
# Test Helpers
# =============================================================================


async def seed_account(session, email: str = "buyer@example.com") -> UUID:
    role = models.Role(name=f"user-{uuid7().hex[-8:]}")
    session.add(role)
    await session.commit()

    account = Account(id=uuid7(), email=email, name="Buyer", role_id=role.id)
    await AccountRepository(session).create(account)
    return account.id


async def seed_device(session, account_id: UUID, fingerprint: str, clock) -> Device:
    return await DeviceRepository(session).create(
        Device(
            id=uuid7(),
            account_id=account_id,
            fingerprint=fingerprint,
            device_name="Chrome on Mac OS X",
            device_type="desktop",
            last_active_at=clock.now(),
        )
    )


def build_session(account_id: UUID, device_id: UUID, refresh_token: str, clock):
    return Session(
        id=uuid7(),
        account_id=account_id,
        device_id=device_id,
        access_token=f"access-{refresh_token}",
        refresh_token=refresh_token,
        expires_at=clock.now() + timedelta(days=7),
        ip_address="10.0.0.1",
        last_used_at=clock.now(),
    )


# =============================================================================
# Session Repository
# =============================================================================


@pytest.mark.integration
class TestSessionRepository:
    """Test session persistence against a real database."""

    @pytest.mark.asyncio
    async def test_find_valid_until_expiry(self, test_database, frozen_clock):
        async with test_database.get_session() as db:
            # Arrange
            account_id = await seed_account(db)
            device = await seed_device(db, account_id, "a" * 64, frozen_clock)
            repo = SessionRepository(db)
            created = await repo.create(
                build_session(account_id, device.id, "refresh-1", frozen_clock)
            )

            # Act
            found = await repo.find_valid_by_refresh_token(
                "refresh-1", frozen_clock.now()
            )
            at_expiry = await repo.find_valid_by_refresh_token(
                "refresh-1", created.expires_at
            )

            # Assert
            assert found is not None
            assert found.id == created.id
            assert found.expires_at == frozen_clock.now() + timedelta(days=7)
            assert at_expiry is None
            assert (
                await repo.find_valid_by_refresh_token("unknown", frozen_clock.now())
                is None
            )

    @pytest.mark.asyncio
    async def test_rotate_access_token(self, test_database, frozen_clock):
        async with test_database.get_session() as db:
            # Arrange
            account_id = await seed_account(db)
            device = await seed_device(db, account_id, "a" * 64, frozen_clock)
            repo = SessionRepository(db)
            session = await repo.create(
                build_session(account_id, device.id, "refresh-1", frozen_clock)
            )
            frozen_clock.advance(minutes=20)

            # Act
            await repo.rotate_access_token(
                session.id, "access-rotated", "10.0.0.9", frozen_clock.now()
            )

            # Assert
            found = await repo.find_valid_by_refresh_token(
                "refresh-1", frozen_clock.now()
            )
            assert found is not None
            assert found.access_token == "access-rotated"
            assert found.ip_address == "10.0.0.9"
            assert found.last_used_at == frozen_clock.now()
            assert found.refresh_token == "refresh-1"

    @pytest.mark.asyncio
    async def test_deactivate_is_scoped_to_owner(self, test_database, frozen_clock):
        async with test_database.get_session() as db:
            # Arrange
            account_id = await seed_account(db)
            other_id = await seed_account(db, "other@example.com")
            device = await seed_device(db, account_id, "a" * 64, frozen_clock)
            repo = SessionRepository(db)
            await repo.create(
                build_session(account_id, device.id, "refresh-1", frozen_clock)
            )

            # Act
            by_other = await repo.deactivate("refresh-1", other_id)
            by_owner = await repo.deactivate("refresh-1", account_id)
            repeated = await repo.deactivate("refresh-1", account_id)

            # Assert
            assert by_other == 0
            assert by_owner == 1
            assert repeated == 0
            assert (
                await repo.find_valid_by_refresh_token("refresh-1", frozen_clock.now())
                is None
            )

    @pytest.mark.asyncio
    async def test_deactivate_all_and_per_device(self, test_database, frozen_clock):
        async with test_database.get_session() as db:
            # Arrange
            account_id = await seed_account(db)
            laptop = await seed_device(db, account_id, "a" * 64, frozen_clock)
            phone = await seed_device(db, account_id, "b" * 64, frozen_clock)
            repo = SessionRepository(db)
            for token, device in (("r1", laptop), ("r2", laptop), ("r3", phone)):
                await repo.create(build_session(account_id, device.id, token, frozen_clock))

            # Act
            per_device = await repo.deactivate_for_device(account_id, phone.id)
            remaining = await repo.deactivate_all(account_id)

            # Assert
            assert per_device == 1
            assert remaining == 2
            assert await repo.list_active(account_id, frozen_clock.now()) == []

    @pytest.mark.asyncio
    async def test_list_active_newest_first(self, test_database, frozen_clock):
        async with test_database.get_session() as db:
            # Arrange
            account_id = await seed_account(db)
            device = await seed_device(db, account_id, "a" * 64, frozen_clock)
            repo = SessionRepository(db)
            older = await repo.create(
                build_session(account_id, device.id, "r1", frozen_clock)
            )
            frozen_clock.advance(minutes=5)
            newer = await repo.create(
                build_session(account_id, device.id, "r2", frozen_clock)
            )
            frozen_clock.advance(minutes=5)
            revoked = await repo.create(
                build_session(account_id, device.id, "r3", frozen_clock)
            )
            await repo.deactivate(revoked.refresh_token, account_id)

            # Act
            sessions = await repo.list_active(account_id, frozen_clock.now())

            # Assert
            assert [s.id for s in sessions] == [newer.id, older.id]
            assert all(s.device_name == "Chrome on Mac OS X" for s in sessions)


# =============================================================================
# Device Repository
# =============================================================================


@pytest.mark.integration
class TestDeviceRepository:
    """Test device persistence against a real database."""

    @pytest.mark.asyncio
    async def test_duplicate_fingerprint_returns_existing(
        self, test_database, frozen_clock
    ):
        async with test_database.get_session() as db:
            # Arrange
            account_id = await seed_account(db)
            first = await seed_device(db, account_id, "a" * 64, frozen_clock)

            # Act
            second = await seed_device(db, account_id, "a" * 64, frozen_clock)

            # Assert
            assert second.id == first.id

    @pytest.mark.asyncio
    async def test_find_by_id_is_scoped_to_owner(self, test_database, frozen_clock):
        async with test_database.get_session() as db:
            # Arrange
            account_id = await seed_account(db)
            other_id = await seed_account(db, "other@example.com")
            device = await seed_device(db, account_id, "a" * 64, frozen_clock)
            repo = DeviceRepository(db)

            # Act / Assert
            assert await repo.find_by_id(account_id, device.id) is not None
            assert await repo.find_by_id(other_id, device.id) is None

    @pytest.mark.asyncio
    async def test_list_active_counts_usable_sessions(
        self, test_database, frozen_clock
    ):
        async with test_database.get_session() as db:
            # Arrange
            account_id = await seed_account(db)
            laptop = await seed_device(db, account_id, "a" * 64, frozen_clock)
            phone = await seed_device(db, account_id, "b" * 64, frozen_clock)
            retired = await seed_device(db, account_id, "c" * 64, frozen_clock)
            sessions = SessionRepository(db)
            await sessions.create(build_session(account_id, laptop.id, "r1", frozen_clock))
            await sessions.create(build_session(account_id, laptop.id, "r2", frozen_clock))
            await sessions.create(build_session(account_id, phone.id, "r3", frozen_clock))
            await sessions.deactivate("r3", account_id)
            repo = DeviceRepository(db)
            await repo.deactivate(retired.id)
            frozen_clock.advance(minutes=1)
            await repo.touch(phone.id, frozen_clock.now())

            # Act
            devices = await repo.list_active(account_id, frozen_clock.now())

            # Assert
            counts = {device.id: device.active_session_count for device in devices}
            assert counts == {laptop.id: 2, phone.id: 0}
            assert devices[0].id == phone.id

    @pytest.mark.asyncio
    async def test_record_activity_reactivates(self, test_database, frozen_clock):
        async with test_database.get_session() as db:
            # Arrange
            account_id = await seed_account(db)
            device = await seed_device(db, account_id, "a" * 64, frozen_clock)
            repo = DeviceRepository(db)
            await repo.deactivate(device.id)
            frozen_clock.advance(hours=1)

            # Act
            await repo.record_activity(device.id, "10.0.0.7", frozen_clock.now())

            # Assert
            found = await repo.find_by_fingerprint(account_id, "a" * 64)
            assert found is not None
            assert found.is_active is True
            assert found.ip_address == "10.0.0.7"
            assert found.last_active_at == frozen_clock.now()
