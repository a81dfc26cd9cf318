"""Repository dependency factories.

Request-scoped repository instances for domain entity persistence.
Each request gets fresh repository instances sharing one session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.clock import Clock
from src.core.config import settings
from src.core.container.infrastructure import get_clock, get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        DeviceRepository,
        RoleRepository,
        SessionRepository,
        VerificationCodeRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_account_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "AccountRepository":
    """Get account repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        AccountRepository instance.
    """
    from src.infrastructure.persistence.repositories import AccountRepository

    return AccountRepository(session=session)


async def get_role_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "RoleRepository":
    from src.infrastructure.persistence.repositories import RoleRepository

    return RoleRepository(session=session)


async def get_verification_code_repository(
    session: AsyncSession = Depends(get_db_session),
    clock: Clock = Depends(get_clock),
) -> "VerificationCodeRepository":
    """Get verification code repository (request-scoped).

    Code lifetime comes from OTP_EXPIRES_SECONDS.
    """
    from src.infrastructure.persistence.repositories import (
        VerificationCodeRepository,
    )

    return VerificationCodeRepository(
        session=session,
        clock=clock,
        ttl_seconds=settings.otp_expires_seconds,
    )


async def get_device_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "DeviceRepository":
    from src.infrastructure.persistence.repositories import DeviceRepository

    return DeviceRepository(session=session)


async def get_session_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "SessionRepository":
    from src.infrastructure.persistence.repositories import SessionRepository

    return SessionRepository(session=session)
