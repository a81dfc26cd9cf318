"""Permission dependencies.

Checks the Principal attached by the authentication gate against the
permission names a route declares in the route registry.

Architecture:
    - Authentication (auth_dependencies.py): Verifies identity (401)
    - Authorization (this file): Verifies permissions (403)

Usage:
    @router.patch("/admin/accounts/{account_id}/status")
    async def update_status(
        principal: CurrentPrincipal,
        _: None = Depends(require_permissions("users.update")),
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, status

from src.core.container import get_permission_resolver
from src.core.enums import ErrorCode
from src.domain.protocols import PermissionResolverProtocol
from src.domain.value_objects import Principal
from src.presentation.routers.api.errors import ApiException
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_principal,
)


def require_permissions(*names: str) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires EVERY listed permission.

    Args:
        *names: Permission names (e.g. "users.update"). None means allow.

    Returns:
        Dependency function that validates the principal holds all names.

    Raises:
        ApiException 403 INSUFFICIENT_PERMISSIONS: If any name is missing.
    """
    required = tuple(names)

    async def permission_checker(
        principal: Annotated[Principal, Depends(get_current_principal)],
        resolver: Annotated[
            PermissionResolverProtocol, Depends(get_permission_resolver)
        ],
    ) -> None:
        if not resolver.check(principal, required):
            raise ApiException(
                status_code=status.HTTP_403_FORBIDDEN,
                code=ErrorCode.INSUFFICIENT_PERMISSIONS,
                message="Insufficient permissions",
            )

    return permission_checker
