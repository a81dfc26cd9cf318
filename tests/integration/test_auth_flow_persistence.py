"""Integration tests for auth flows running on the real repositories.

Tests cover:
- Verifying an email twice with the same code (second call is idempotent)
- Two concurrent refreshes with one refresh token

Architecture:
- Handlers wired to REAL repositories (in-memory SQLite)
- Each concurrent request gets its own database session, as in the app
"""

import asyncio
from datetime import timedelta

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import RefreshAccessToken, VerifyEmail
from src.application.commands.handlers.refresh_token_handler import (
    RefreshAccessTokenHandler,
)
from src.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)
from src.application.services.device_registry import DeviceRegistry
from src.core.result import Success
from src.domain.entities.account import Account
from src.domain.entities.device import Device
from src.domain.entities.session import Session
from src.domain.enums import VerificationPurpose
from src.domain.protocols import TokenClaims
from src.infrastructure.enrichers.device_enricher import UserAgentDeviceParser
from src.infrastructure.persistence import models
from src.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from src.infrastructure.persistence.repositories.device_repository import (
    DeviceRepository,
)
from src.infrastructure.persistence.repositories.session_repository import (
    SessionRepository,
)
from src.infrastructure.persistence.repositories.verification_code_repository import (
    VerificationCodeRepository,
)
from src.infrastructure.security.jwt_service import JWTService

EMAIL = "buyer@example.com"


async def seed_account(db) -> Account:
    role = models.Role(name="user")
    db.add(role)
    await db.commit()

    account = Account(id=uuid7(), email=EMAIL, name="Buyer", role_id=role.id)
    await AccountRepository(db).create(account)
    return account


@pytest.mark.integration
class TestVerifyEmailTwice:
    """Second verification with an already spent code."""

    @pytest.mark.asyncio
    async def test_second_verification_is_idempotent_success(
        self, test_database, frozen_clock, mock_logger
    ):
        async with test_database.get_session() as db:
            # Arrange
            await seed_account(db)
            code_repo = VerificationCodeRepository(db, frozen_clock)
            code = await code_repo.issue(EMAIL, VerificationPurpose.REGISTER)
            handler = VerifyEmailHandler(
                account_repo=AccountRepository(db),
                code_repo=code_repo,
                clock=frozen_clock,
                logger=mock_logger,
            )

            # Act
            first = await handler.handle(VerifyEmail(email=EMAIL, code=code))
            second = await handler.handle(VerifyEmail(email=EMAIL, code=code))

            # Assert
            assert isinstance(first, Success)
            assert first.value.message == "Email verified successfully"
            assert isinstance(second, Success)
            assert second.value.message == "Email already verified"
            account = await AccountRepository(db).find_by_email(EMAIL)
            assert account.verified_at == frozen_clock.now()

    @pytest.mark.asyncio
    async def test_wrong_code_for_unverified_account_still_fails(
        self, test_database, frozen_clock, mock_logger
    ):
        async with test_database.get_session() as db:
            # Arrange
            await seed_account(db)
            code_repo = VerificationCodeRepository(db, frozen_clock)
            code = await code_repo.issue(EMAIL, VerificationPurpose.REGISTER)
            wrong = "100000" if code != "100000" else "100001"
            handler = VerifyEmailHandler(
                account_repo=AccountRepository(db),
                code_repo=code_repo,
                clock=frozen_clock,
                logger=mock_logger,
            )

            # Act
            result = await handler.handle(VerifyEmail(email=EMAIL, code=wrong))

            # Assert
            assert not isinstance(result, Success)
            account = await AccountRepository(db).find_by_email(EMAIL)
            assert account.verified_at is None


@pytest.mark.integration
class TestConcurrentRefresh:
    """Refresh tokens are reusable and never rotated."""

    @pytest.mark.asyncio
    async def test_concurrent_refreshes_both_succeed(
        self, test_database, frozen_clock, mock_logger
    ):
        # Arrange
        token_service = JWTService(
            access_secret="test-access-secret-0123456789abcdefghij",
            refresh_secret="test-refresh-secret-0123456789abcdefghij",
            clock=frozen_clock,
        )
        async with test_database.get_session() as db:
            account = await seed_account(db)
            device = await DeviceRepository(db).create(
                Device(
                    id=uuid7(),
                    account_id=account.id,
                    fingerprint="f" * 64,
                    device_name="Chrome on Mac OS X",
                    device_type="desktop",
                    last_active_at=frozen_clock.now(),
                )
            )
            claims = TokenClaims(
                account_id=account.id,
                email=EMAIL,
                role="user",
                device_id=device.id,
            )
            refresh_token = token_service.sign_refresh(claims)
            session = await SessionRepository(db).create(
                Session(
                    id=uuid7(),
                    account_id=account.id,
                    device_id=device.id,
                    access_token=token_service.sign_access(claims),
                    refresh_token=refresh_token,
                    expires_at=frozen_clock.now() + timedelta(days=7),
                    last_used_at=frozen_clock.now(),
                )
            )
        frozen_clock.advance(minutes=5)

        async def refresh(ip_address: str):
            async with test_database.get_session() as db:
                handler = RefreshAccessTokenHandler(
                    session_repo=SessionRepository(db),
                    device_registry=DeviceRegistry(
                        DeviceRepository(db),
                        UserAgentDeviceParser(),
                        frozen_clock,
                        mock_logger,
                    ),
                    token_service=token_service,
                    clock=frozen_clock,
                    logger=mock_logger,
                )
                return await handler.handle(
                    RefreshAccessToken(
                        refresh_token=refresh_token, ip_address=ip_address
                    )
                )

        # Act
        results = await asyncio.gather(refresh("10.0.0.1"), refresh("10.0.0.2"))

        # Assert
        for result in results:
            assert isinstance(result, Success)
            assert result.value.refresh_token == refresh_token
        async with test_database.get_session() as db:
            stored = await SessionRepository(db).find_valid_by_refresh_token(
                refresh_token, frozen_clock.now()
            )
        assert stored is not None
        assert stored.id == session.id
        assert stored.refresh_token == refresh_token
        assert stored.is_active is True
