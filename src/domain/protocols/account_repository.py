"""AccountRepository protocol for account persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.account import Account
from src.domain.enums import AccountStatus


class AccountRepository(Protocol):
    """Account repository protocol (port).

    Soft-deleted accounts (``deleted_at`` set) are invisible to every method.

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve account by ID
        find_by_email: Retrieve account by address
        find_by_google_id: Retrieve account by linked Google subject
        create: Insert new account (False on unique violation)
        update: Persist mutable fields of an existing account
        set_status: Change lifecycle status
    """

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by address (case-insensitive).

        Args:
            email: Account address.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def find_by_google_id(self, google_id: str) -> Account | None:
        """Find account by linked Google subject id."""
        ...

    async def create(self, account: Account) -> bool:
        """Insert a new account.

        The unique constraint on the address is the source of truth for
        concurrent registrations.

        Args:
            account: Account entity to persist.

        Returns:
            True if inserted, False if the address (or Google id) is taken.
        """
        ...

    async def update(self, account: Account) -> None:
        """Persist the mutable fields of an existing account.

        Args:
            account: Account entity with updated fields.
        """
        ...

    async def set_status(self, account_id: UUID, status: AccountStatus) -> bool:
        """Change lifecycle status.

        Returns:
            True if the account exists, False otherwise.
        """
        ...
