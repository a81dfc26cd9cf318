"""
Main FastAPI application entry point.

Wires the registry-generated API routes, the system endpoints, middleware
and global exception handlers. The permission resolver is loaded from the
role tables at startup; the database pool is disposed at shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.presentation.routers import api_router, system_router
from src.presentation.routers.api.errors import register_exception_handlers
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Load role grants into the permission resolver
    - Shutdown: Dispose the database connection pool

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    from src.core.container import get_database, get_logger, init_permission_resolver

    await init_permission_resolver()
    get_logger().info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await get_database().close()
    get_logger().info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Authentication and session security API",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register global exception handlers (uniform error envelope)
register_exception_handlers(app)

# Registry-generated API routes + system endpoints
app.include_router(api_router)
app.include_router(system_router)
