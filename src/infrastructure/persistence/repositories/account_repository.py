"""AccountRepository - SQLAlchemy implementation of AccountRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Account entities and database Account models.

Soft-deleted rows (``deleted_at`` set) are excluded from every query.
"""

from typing import Any, cast
from uuid import UUID

from sqlalchemy import and_, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.account import Account
from src.domain.enums import AccountStatus
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.account import Account as AccountModel


class AccountRepository:
    """SQLAlchemy implementation of AccountRepository protocol.

    This class does NOT inherit from the AccountRepository protocol
    (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = AccountRepository(session)
        ...     account = await repo.find_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Domain Account entity if found, None otherwise.
        """
        return await self._find_one(AccountModel.id == account_id)

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by address (case-insensitive).

        Args:
            email: Account address.

        Returns:
            Domain Account entity if found, None otherwise.
        """
        return await self._find_one(
            func.lower(AccountModel.email) == email.strip().lower()
        )

    async def find_by_google_id(self, google_id: str) -> Account | None:
        return await self._find_one(AccountModel.google_id == google_id)

    async def create(self, account: Account) -> bool:
        """Insert a new account.

        Returns:
            True if inserted, False when a unique constraint (address or
            Google id) rejected the row.
        """
        account_model = self._to_model(account)
        self.session.add(account_model)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return False
        return True

    async def update(self, account: Account) -> None:
        """Persist the mutable fields of an existing account.

        Raises:
            NoResultFound: If the account doesn't exist (or is soft-deleted).
        """
        stmt = select(AccountModel).where(
            and_(AccountModel.id == account.id, AccountModel.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        account_model = result.scalar_one()

        account_model.email = account.email
        account_model.name = account.name
        account_model.password_hash = account.password_hash
        account_model.phone_number = account.phone_number
        account_model.avatar = account.avatar
        account_model.verified_at = account.verified_at
        account_model.status = account.status.value
        account_model.two_factor_enabled = account.two_factor_enabled
        account_model.totp_secret = account.totp_secret
        account_model.google_id = account.google_id
        account_model.role_id = account.role_id

        await self.session.commit()

    async def set_status(self, account_id: UUID, status: AccountStatus) -> bool:
        stmt = (
            update(AccountModel)
            .where(
                and_(
                    AccountModel.id == account_id,
                    AccountModel.deleted_at.is_(None),
                )
            )
            .values(status=status.value)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return (cast(Any, result).rowcount or 0) > 0

    async def _find_one(self, condition: Any) -> Account | None:
        stmt = select(AccountModel).where(
            and_(condition, AccountModel.deleted_at.is_(None))
        ).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        account_model = result.unique().scalar_one_or_none()

        if account_model is None:
            return None

        return self._to_domain(account_model)

    def _to_domain(self, account_model: AccountModel) -> Account:
        """Convert database model to domain entity."""
        return Account(
            id=account_model.id,
            email=account_model.email,
            name=account_model.name,
            role_id=account_model.role_id,
            role_name=account_model.role.name,
            password_hash=account_model.password_hash,
            phone_number=account_model.phone_number,
            avatar=account_model.avatar,
            verified_at=as_utc(account_model.verified_at),
            status=AccountStatus(account_model.status),
            two_factor_enabled=account_model.two_factor_enabled,
            totp_secret=account_model.totp_secret,
            google_id=account_model.google_id,
            created_at=as_utc(account_model.created_at),
            updated_at=as_utc(account_model.updated_at),
        )

    def _to_model(self, account: Account) -> AccountModel:
        """Convert domain entity to database model (for inserts)."""
        return AccountModel(
            id=account.id,
            email=account.email,
            name=account.name,
            role_id=account.role_id,
            password_hash=account.password_hash,
            phone_number=account.phone_number,
            avatar=account.avatar,
            verified_at=account.verified_at,
            status=account.status.value,
            two_factor_enabled=account.two_factor_enabled,
            totp_secret=account.totp_secret,
            google_id=account.google_id,
        )
