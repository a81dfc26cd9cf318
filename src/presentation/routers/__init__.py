"""HTTP routers.

api_router carries every registry-generated endpoint; system_router carries
the root and health checks.
"""

from src.presentation.routers.api import api_router
from src.presentation.routers.system import system_router

__all__ = ["api_router", "system_router"]
