"""API Route Registry package.

Exports:
    ROUTE_REGISTRY: Declarative metadata for every endpoint
    register_routes_from_registry: Generate FastAPI routes from the registry
"""

from src.presentation.routers.api.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.routes.registry import ROUTE_REGISTRY

__all__ = ["ROUTE_REGISTRY", "register_routes_from_registry"]
