"""RoleRepository protocol for role and permission reference data."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.role import Role


class RoleRepository(Protocol):
    """Read access to roles and their permissions."""

    async def find_by_id(self, role_id: UUID) -> Role | None:
        """Find a role (with permissions) by ID."""
        ...

    async def find_by_name(self, name: str) -> Role | None:
        """Find a role (with permissions) by unique name."""
        ...

    async def list_all(self) -> list[Role]:
        """All roles with their permissions (used to load the enforcer)."""
        ...
