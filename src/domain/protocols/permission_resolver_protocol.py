"""Permission resolver protocol (port).

Decides whether a principal holds every permission a route requires.
Infrastructure implements this with casbin (CasbinAdapter).
"""

from collections.abc import Iterable
from typing import Protocol

from src.domain.entities.role import Role
from src.domain.value_objects import Principal


class PermissionResolverProtocol(Protocol):
    """Role-based permission check.

    Rules:
        - No required permissions: allow
        - Otherwise allow only if EVERY required name is granted (AND)
        - Errors deny (fail closed)
    """

    def load_roles(self, roles: Iterable[Role]) -> None:
        """Replace the policy set with the given roles' grants."""
        ...

    def check(self, principal: Principal, required: Iterable[str]) -> bool:
        """Return True when the principal's role grants every required name."""
        ...

    def permissions_for(self, role_name: str) -> frozenset[str]:
        """Permission names currently granted to the role."""
        ...
