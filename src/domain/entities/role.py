"""Role and permission reference data.

Roles and permissions are static reference data managed outside the
authentication flows. Each account has exactly one role.
"""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class Permission:
    """Named permission guarding an HTTP path and method."""

    id: UUID
    name: str
    path: str
    method: str
    description: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Role:
    """Role with its permission set.

    Attributes:
        id: Role identifier.
        name: Unique role name (admin, manager, user).
        is_active: Inactive roles grant nothing.
        permissions: Permissions granted by this role.
    """

    id: UUID
    name: str
    is_active: bool = True
    description: str | None = None
    permissions: tuple[Permission, ...] = field(default_factory=tuple)

    @property
    def permission_names(self) -> frozenset[str]:
        """Names of all granted permissions (empty if the role is inactive)."""
        if not self.is_active:
            return frozenset()
        return frozenset(p.name for p in self.permissions)
