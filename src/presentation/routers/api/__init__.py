"""API routers.

NOTE: All routes are generated from the Route Metadata Registry at startup.
The registry (ROUTE_REGISTRY) is the single source of truth for all endpoints.
See src/presentation/routers/api/routes/registry.py for the complete route catalog.

Resources:
    /auth              - Registration, verification, passwords, login, tokens
    /auth/sessions     - Session listing and logout
    /auth/devices      - Device listing and revocation
    /auth/2fa          - TOTP two-factor enrollment and login
    /auth/google       - Google login handshake
    /admin             - Permission-gated administration
"""

from fastapi import APIRouter

from src.presentation.routers.api.routes import (
    ROUTE_REGISTRY,
    register_routes_from_registry,
)

api_router = APIRouter()
register_routes_from_registry(api_router, ROUTE_REGISTRY)

__all__ = [
    "api_router",
]
