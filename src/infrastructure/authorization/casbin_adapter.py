"""Casbin implementation of PermissionResolverProtocol.

Policies are (role name, permission name) pairs loaded from the
roles/permissions tables at startup. A route may require several
permissions; access is granted only when the principal's role holds every
one of them.

Following hexagonal architecture:
- Infrastructure implements domain protocol (PermissionResolverProtocol)
- Domain doesn't know about Casbin
"""

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

import casbin

from src.domain.entities.role import Role
from src.domain.value_objects import Principal

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


MODEL_PATH = Path(__file__).with_name("model.conf")


class CasbinAdapter:
    """Casbin-based permission resolver.

    Attributes:
        _enforcer: Casbin Enforcer holding role -> permission policies.
        _logger: Structured logger.
    """

    def __init__(
        self,
        logger: "LoggerProtocol",
        enforcer: casbin.Enforcer | None = None,
    ) -> None:
        """Initialize adapter.

        Args:
            logger: Structured logger.
            enforcer: Pre-built enforcer (a fresh one using model.conf when
                omitted).
        """
        self._enforcer = enforcer or casbin.Enforcer(str(MODEL_PATH))
        self._logger = logger

    def load_roles(self, roles: Iterable[Role]) -> None:
        """Replace all policies with the grants of the given roles.

        Inactive roles contribute nothing.

        Args:
            roles: Roles with their permissions.
        """
        self._enforcer.clear_policy()
        count = 0
        for role in roles:
            for name in sorted(role.permission_names):
                self._enforcer.add_policy(role.name, name)
                count += 1
        self._logger.info("authorization_policies_loaded", policy_count=count)

    def check(self, principal: Principal, required: Iterable[str]) -> bool:
        """Check that the principal's role grants every required permission.

        Args:
            principal: Authenticated identity.
            required: Permission names the route declares.

        Returns:
            bool: True if allowed (always when nothing is required), False
                otherwise. Enforcer errors deny.
        """
        required_names = tuple(required)
        if not required_names:
            return True

        try:
            missing = [
                name
                for name in required_names
                if not self._enforcer.enforce(principal.role, name)
            ]
        except Exception as e:
            # Fail closed on errors
            self._logger.error(
                "authorization_check_error",
                error=e,
                account_id=str(principal.id),
                role=principal.role,
            )
            return False

        allowed = not missing
        self._logger.info(
            "authorization_check",
            account_id=str(principal.id),
            role=principal.role,
            required=list(required_names),
            missing=missing,
            allowed=allowed,
        )
        return allowed

    def permissions_for(self, role_name: str) -> frozenset[str]:
        """Permission names currently granted to a role."""
        return frozenset(
            rule[1] for rule in self._enforcer.get_filtered_policy(0, role_name)
        )
