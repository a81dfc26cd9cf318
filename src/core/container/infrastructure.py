# mypy: disable-error-code="arg-type"
"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (SQLAlchemy async engine)
- Clock
- Password hashing (bcrypt)
- Token signing (JWT)
- TOTP (pyotp + qrcode)
- Email (stub)
- Device parsing (user-agents)
- Google OAuth client (httpx)
- Logging (console)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.clock import Clock, SystemClock
from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols import (
        DeviceParserProtocol,
        EmailProtocol,
        GoogleOAuthProtocol,
        LoggerProtocol,
        PasswordHashingProtocol,
        TokenServiceProtocol,
        TotpProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_clock() -> Clock:
    """Get the time source (app-scoped). Tests override it with a frozen clock."""
    return SystemClock()


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor
    (12 by default, ~250ms per hash).
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenServiceProtocol":
    """Get JWT token service singleton (app-scoped).

    Access and pending-2FA tokens are signed with JWT_SECRET, refresh tokens
    with JWT_REFRESH_SECRET.
    """
    from src.infrastructure.security import JWTService

    return JWTService(
        access_secret=settings.jwt_secret,
        refresh_secret=settings.jwt_refresh_secret,
        access_expires_minutes=settings.jwt_expires_minutes,
        refresh_expires_days=settings.jwt_refresh_expires_days,
        clock=get_clock(),
    )


@lru_cache()
def get_totp_service() -> "TotpProtocol":
    """Get TOTP service singleton (app-scoped)."""
    from src.infrastructure.security import PyOTPTotpService

    return PyOTPTotpService(
        issuer=settings.effective_totp_issuer,
        digits=settings.totp_digits,
        period=settings.totp_period,
        window=settings.totp_window,
        clock=get_clock(),
    )


# ============================================================================
# Outbound Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Every environment uses StubEmailService (logs the send, never the code).
    A real provider plugs in here.
    """
    from src.infrastructure.email import StubEmailService

    return StubEmailService(logger=get_logger())


@lru_cache()
def get_device_parser() -> "DeviceParserProtocol":
    """Get user agent parser singleton (app-scoped)."""
    from src.infrastructure.enrichers import UserAgentDeviceParser

    return UserAgentDeviceParser()


@lru_cache()
def get_google_oauth_client() -> "GoogleOAuthProtocol":
    """Get Google OAuth client singleton (app-scoped)."""
    from src.infrastructure.oauth import GoogleOAuthClient

    return GoogleOAuthClient(
        client_id=settings.google_client_id,
        client_secret=settings.google_client_secret,
        callback_url=settings.google_callback_url,
        logger=get_logger(),
    )


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
