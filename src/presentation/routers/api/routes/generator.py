"""Route generator for the API Route Registry.

Converts declarative RouteMetadata entries into FastAPI routes at startup.

Functions:
    register_routes_from_registry: Generate all routes from registry
    _build_dependencies: Build FastAPI dependencies from auth policy
    _build_responses: Build OpenAPI responses dict from error specs

Usage:
    from src.presentation.routers.api.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.routes.generator import register_routes_from_registry

    router = APIRouter()
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_principal,
)
from src.presentation.routers.api.middleware.authorization_dependencies import (
    require_permissions,
)
from src.presentation.routers.api.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    RouteMetadata,
)
from src.schemas.common_schemas import ErrorResponse


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: List of RouteMetadata entries to convert into routes

    Example:
        >>> router = APIRouter()
        >>> register_routes_from_registry(router, ROUTE_REGISTRY)
    """
    for metadata in registry:
        dependencies = _build_dependencies(metadata.auth_policy)
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
            dependencies=dependencies,
            deprecated=metadata.deprecated,
        )


def _build_dependencies(auth_policy: AuthPolicy) -> list[Any]:
    """Build FastAPI dependencies from auth policy.

    Auth policy mapping:
        PUBLIC: No dependencies (anyone can access)
        AUTHENTICATED: Depends(get_current_principal)
        AUTHORIZED: Depends(get_current_principal) +
            Depends(require_permissions(*auth_policy.permissions))

    Args:
        auth_policy: Authentication policy from RouteMetadata

    Returns:
        List of FastAPI dependencies to inject

    Raises:
        ValueError: For an unknown level, or an AUTHORIZED route that
            declares no permissions.
    """
    match auth_policy.level:
        case AuthLevel.PUBLIC:
            return []

        case AuthLevel.AUTHENTICATED:
            return [Depends(get_current_principal)]

        case AuthLevel.AUTHORIZED:
            if not auth_policy.permissions:
                msg = "AUTHORIZED routes must declare at least one permission"
                raise ValueError(msg)
            return [
                Depends(get_current_principal),
                Depends(require_permissions(*auth_policy.permissions)),
            ]

        case _:
            # Unknown auth level - fail closed (no access)
            msg = f"Unknown auth level: {auth_policy.level}"
            raise ValueError(msg)


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error specifications.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="Not found")])
        {404: {"description": "Not found", "model": ErrorResponse}}
    """
    return {
        error.status: {
            "description": error.description,
            "model": error.model or ErrorResponse,
        }
        for error in errors
    }
