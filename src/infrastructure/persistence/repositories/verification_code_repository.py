"""VerificationCodeRepository - SQLAlchemy implementation of the code store.

The (email, purpose) unique constraint lets every issue path replace the
previous code with a single ``INSERT ... ON CONFLICT DO UPDATE``. The
throttled variant adds a ``WHERE created_at <= now - window`` to the
conflict clause, so the throttle check and the replacement are one atomic
statement and concurrent resend requests cannot both issue.
"""

import secrets
from datetime import datetime, timedelta
from typing import Any, cast

from sqlalchemy import and_, case, delete, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from src.core.clock import Clock
from src.domain.enums import VerificationPurpose
from src.domain.protocols import VerificationCodeStatistics
from src.infrastructure.persistence.models.verification_code import (
    VerificationCode as VerificationCodeModel,
)

CODE_MIN = 100000
CODE_SPAN = 900000  # [100000, 999999]


def generate_code() -> str:
    """Uniformly random six-digit code from a CSPRNG."""
    return str(CODE_MIN + secrets.randbelow(CODE_SPAN))


class VerificationCodeRepository:
    """SQLAlchemy implementation of VerificationCodeRepository protocol.

    Attributes:
        session: SQLAlchemy async session.
    """

    def __init__(
        self,
        session: AsyncSession,
        clock: Clock,
        ttl_seconds: int = 300,
    ) -> None:
        """Initialize repository.

        Args:
            session: SQLAlchemy async session.
            clock: Time source for creation and expiry.
            ttl_seconds: Code lifetime (``OTP_EXPIRES_SECONDS``).
        """
        self.session = session
        self._clock = clock
        self._ttl = timedelta(seconds=ttl_seconds)

    async def issue(self, email: str, purpose: VerificationPurpose) -> str:
        """Generate a code, replacing any previous one for the pair."""
        now = self._clock.now()
        code = generate_code()
        stmt = self._upsert(email, purpose, code, now)
        await self.session.execute(stmt)
        await self.session.commit()
        return code

    async def issue_unless_recent(
        self, email: str, purpose: VerificationPurpose, within_seconds: int
    ) -> str | None:
        """Issue a code unless the current one is younger than the window.

        Returns:
            The new code, or None when throttled.
        """
        now = self._clock.now()
        code = generate_code()
        threshold = now - timedelta(seconds=within_seconds)
        stmt = self._upsert(
            email,
            purpose,
            code,
            now,
            only_if=VerificationCodeModel.created_at <= threshold,
        ).returning(VerificationCodeModel.code)
        result = await self.session.execute(stmt)
        issued = result.scalar_one_or_none()
        await self.session.commit()
        return issued

    async def consume(
        self, email: str, code: str, purpose: VerificationPurpose
    ) -> bool:
        stmt = select(VerificationCodeModel.id).where(
            and_(
                VerificationCodeModel.email == email,
                VerificationCodeModel.code == code,
                VerificationCodeModel.purpose == purpose.value,
                VerificationCodeModel.expires_at > self._clock.now(),
            )
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def invalidate(self, email: str, purpose: VerificationPurpose) -> None:
        stmt = delete(VerificationCodeModel).where(
            and_(
                VerificationCodeModel.email == email,
                VerificationCodeModel.purpose == purpose.value,
            )
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def was_issued_recently(
        self, email: str, purpose: VerificationPurpose, within_seconds: int
    ) -> bool:
        threshold = self._clock.now() - timedelta(seconds=within_seconds)
        stmt = select(VerificationCodeModel.id).where(
            and_(
                VerificationCodeModel.email == email,
                VerificationCodeModel.purpose == purpose.value,
                VerificationCodeModel.created_at > threshold,
            )
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def purge_expired(self) -> int:
        """Delete codes past their expiry.

        Returns:
            Number of codes deleted.
        """
        stmt = delete(VerificationCodeModel).where(
            VerificationCodeModel.expires_at <= self._clock.now()
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return cast(Any, result).rowcount or 0

    async def statistics(self) -> VerificationCodeStatistics:
        now = self._clock.now()
        stmt = select(
            VerificationCodeModel.purpose,
            func.count(VerificationCodeModel.id),
            func.sum(case((VerificationCodeModel.expires_at <= now, 1), else_=0)),
        ).group_by(VerificationCodeModel.purpose)
        result = await self.session.execute(stmt)

        by_purpose: dict[str, int] = {}
        expired = 0
        for purpose, count, expired_count in result.all():
            by_purpose[purpose] = int(count)
            expired += int(expired_count or 0)

        return VerificationCodeStatistics(
            total=sum(by_purpose.values()),
            expired=expired,
            by_purpose=by_purpose,
        )

    def _upsert(
        self,
        email: str,
        purpose: VerificationPurpose,
        code: str,
        now: datetime,
        only_if: Any = None,
    ) -> Any:
        """Build a dialect-specific insert that replaces the pair's code."""
        dialect = self.session.get_bind().dialect.name
        insert = postgresql.insert if dialect == "postgresql" else sqlite.insert

        stmt = insert(VerificationCodeModel).values(
            id=uuid7(),
            email=email,
            code=code,
            purpose=purpose.value,
            expires_at=now + self._ttl,
            created_at=now,
        )
        return stmt.on_conflict_do_update(
            index_elements=[VerificationCodeModel.email, VerificationCodeModel.purpose],
            set_={
                "code": stmt.excluded.code,
                "expires_at": stmt.excluded.expires_at,
                "created_at": stmt.excluded.created_at,
            },
            where=only_if,
        )
