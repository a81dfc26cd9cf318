"""Integration tests for AccountRepository and RoleRepository.

Tests cover:
- Create and find (by id, case-insensitive email, Google id)
- Unique constraint rejection returns False instead of raising
- Update of mutable fields
- Status changes
- Role lookup with permissions

Architecture:
- Integration tests with a REAL database (in-memory SQLite)
- Roles are seeded directly through the ORM models
"""

from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.domain.entities.account import Account
from src.domain.enums import AccountStatus
from src.infrastructure.persistence import models
from src.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from src.infrastructure.persistence.repositories.role_repository import (
    RoleRepository,
)


# =============================================================================
# Test Helpers
# =============================================================================


async def seed_role(session, name: str = "user", permissions=()) -> UUID:
    role = models.Role(
        name=name,
        permissions=[
            models.Permission(name=permission, path="/admin", method="PATCH")
            for permission in permissions
        ],
    )
    session.add(role)
    await session.commit()
    return role.id


def create_test_account(role_id: UUID, email: str = "buyer@example.com", **kwargs):
    return Account(
        id=uuid7(),
        email=email,
        name="Buyer",
        role_id=role_id,
        password_hash="$2b$10$hash",
        **kwargs,
    )


# =============================================================================
# Account Repository
# =============================================================================


@pytest.mark.integration
class TestAccountRepository:
    """Test account persistence against a real database."""

    @pytest.mark.asyncio
    async def test_create_and_find(self, test_database):
        async with test_database.get_session() as session:
            # Arrange
            role_id = await seed_role(session)
            repo = AccountRepository(session)
            account = create_test_account(role_id, google_id="google-sub-1")

            # Act
            created = await repo.create(account)
            by_id = await repo.find_by_id(account.id)
            by_email = await repo.find_by_email("  BUYER@Example.com ")
            by_google = await repo.find_by_google_id("google-sub-1")

            # Assert
            assert created is True
            assert by_id is not None
            assert by_id.email == "buyer@example.com"
            assert by_id.role_name == "user"
            assert by_id.status == AccountStatus.ACTIVE
            assert by_id.is_verified is False
            assert by_email is not None and by_email.id == account.id
            assert by_google is not None and by_google.id == account.id

    @pytest.mark.asyncio
    async def test_missing_account(self, test_database):
        async with test_database.get_session() as session:
            repo = AccountRepository(session)

            assert await repo.find_by_id(uuid7()) is None
            assert await repo.find_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected(self, test_database):
        async with test_database.get_session() as session:
            # Arrange
            role_id = await seed_role(session)
            repo = AccountRepository(session)
            first = create_test_account(role_id)
            await repo.create(first)

            # Act
            created = await repo.create(create_test_account(role_id))

            # Assert
            assert created is False
            stored = await repo.find_by_email("buyer@example.com")
            assert stored is not None
            assert stored.id == first.id

    @pytest.mark.asyncio
    async def test_update_persists_mutable_fields(self, test_database, frozen_clock):
        async with test_database.get_session() as session:
            # Arrange
            role_id = await seed_role(session)
            repo = AccountRepository(session)
            account = create_test_account(role_id)
            await repo.create(account)

            # Act
            account.name = "Renamed Buyer"
            account.mark_verified(frozen_clock.now())
            account.begin_two_factor_enrollment("JBSWY3DPEHPK3PXP")
            account.confirm_two_factor()
            await repo.update(account)

            # Assert
            stored = await repo.find_by_id(account.id)
            assert stored is not None
            assert stored.name == "Renamed Buyer"
            assert stored.verified_at == frozen_clock.now()
            assert stored.two_factor_enabled is True
            assert stored.totp_secret == "JBSWY3DPEHPK3PXP"

    @pytest.mark.asyncio
    async def test_set_status(self, test_database):
        async with test_database.get_session() as session:
            # Arrange
            role_id = await seed_role(session)
            repo = AccountRepository(session)
            account = create_test_account(role_id)
            await repo.create(account)

            # Act
            changed = await repo.set_status(account.id, AccountStatus.BLOCKED)
            missing = await repo.set_status(uuid7(), AccountStatus.BLOCKED)

            # Assert
            assert changed is True
            assert missing is False
            stored = await repo.find_by_id(account.id)
            assert stored is not None
            assert stored.is_blocked is True


# =============================================================================
# Role Repository
# =============================================================================


@pytest.mark.integration
class TestRoleRepository:
    """Test role lookups."""

    @pytest.mark.asyncio
    async def test_find_by_name_includes_permissions(self, test_database):
        async with test_database.get_session() as session:
            # Arrange
            await seed_role(session, "admin", ["users.update", "users.delete"])
            repo = RoleRepository(session)

            # Act
            role = await repo.find_by_name("admin")

            # Assert
            assert role is not None
            assert role.permission_names == frozenset({"users.update", "users.delete"})

    @pytest.mark.asyncio
    async def test_list_all_orders_by_name(self, test_database):
        async with test_database.get_session() as session:
            # Arrange
            await seed_role(session, "user")
            await seed_role(session, "admin", ["users.update"])
            repo = RoleRepository(session)

            # Act
            roles = await repo.list_all()

            # Assert
            assert [role.name for role in roles] == ["admin", "user"]
            assert await repo.find_by_name("missing") is None
