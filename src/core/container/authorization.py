"""Authorization dependency factories.

Casbin permission resolver. Policies are loaded from the role and
permission tables at application startup.
"""

from typing import TYPE_CHECKING

from src.core.container.infrastructure import get_database, get_logger

if TYPE_CHECKING:
    from src.domain.protocols import PermissionResolverProtocol


# Module-level state for resolver singleton
_resolver: "PermissionResolverProtocol | None" = None


async def init_permission_resolver() -> "PermissionResolverProtocol":
    """Build the resolver and load role grants from the database.

    MUST be called during FastAPI lifespan startup. Calling it again
    reloads the policies (after a role change).

    Returns:
        Initialized permission resolver.
    """
    global _resolver

    from src.infrastructure.authorization import CasbinAdapter
    from src.infrastructure.persistence.repositories import RoleRepository

    async with get_database().get_session() as session:
        roles = await RoleRepository(session=session).list_all()

    resolver = _resolver or CasbinAdapter(logger=get_logger())
    resolver.load_roles(roles)
    _resolver = resolver

    get_logger().info("permission_resolver_initialized", role_count=len(roles))
    return resolver


def get_permission_resolver() -> "PermissionResolverProtocol":
    """Get the permission resolver singleton.

    Raises:
        RuntimeError: If called before init_permission_resolver().
    """
    if _resolver is None:
        raise RuntimeError(
            "Permission resolver not initialized. "
            "Call init_permission_resolver() during startup."
        )
    return _resolver
