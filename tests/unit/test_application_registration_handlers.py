"""Unit tests for the registration and password-recovery handlers.

Tests cover:
- RegisterHandler (new account, duplicate address, missing default role)
- VerifyEmailHandler (valid code, wrong code, already verified, spent code)
- ResendVerificationHandler (resend, throttled, unknown address)
- ForgotPasswordHandler (always the generic message)
- ResetPasswordHandler (password replaced, every session revoked)

Architecture:
- Unit tests for application handlers (mocked repositories and services)
- Async tests (handlers use async repositories)
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import (
    ForgotPassword,
    Register,
    ResendVerification,
    ResetPassword,
    VerifyEmail,
)
from src.application.commands.handlers.forgot_password_handler import (
    GENERIC_MESSAGE,
    ForgotPasswordHandler,
)
from src.application.commands.handlers.register_handler import RegisterHandler
from src.application.commands.handlers.resend_verification_handler import (
    ResendVerificationHandler,
)
from src.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from src.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)
from src.application.errors import ApplicationErrorCode, AuthFailures
from src.core.result import Failure, Success
from src.domain.entities.account import Account
from src.domain.entities.role import Role
from src.domain.enums import AccountStatus, VerificationPurpose

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def create_account(
    email: str = "buyer@example.com",
    verified: bool = False,
    password_hash: str | None = "hashed",
    status: AccountStatus = AccountStatus.ACTIVE,
) -> Account:
    return Account(
        id=uuid7(),
        email=email,
        name="Buyer",
        role_id=uuid7(),
        password_hash=password_hash,
        verified_at=NOW if verified else None,
        status=status,
    )


def create_clock() -> Mock:
    clock = Mock()
    clock.now.return_value = NOW
    return clock


@pytest.mark.unit
class TestRegisterHandler:
    """Test account registration."""

    def _handler(self, account_repo, role_repo, code_repo, email_service, mock_logger):
        password_service = Mock()
        password_service.hash_password.return_value = "bcrypt-digest"
        return RegisterHandler(
            account_repo=account_repo,
            role_repo=role_repo,
            code_repo=code_repo,
            password_service=password_service,
            email_service=email_service,
            clock=create_clock(),
            logger=mock_logger,
        )

    @pytest.mark.asyncio
    async def test_register_creates_unverified_account_and_sends_code(
        self, mock_logger
    ):
        # Arrange
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = None
        account_repo.create.return_value = True
        role_repo = AsyncMock()
        role_repo.find_by_name.return_value = Role(id=uuid7(), name="user")
        code_repo = AsyncMock()
        code_repo.issue.return_value = "482913"
        email_service = AsyncMock()
        handler = self._handler(
            account_repo, role_repo, code_repo, email_service, mock_logger
        )

        # Act
        result = await handler.handle(
            Register(email="buyer@example.com", password="SecurePass1", name="Buyer")
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.account.email == "buyer@example.com"
        assert result.value.account.is_verified is False
        assert result.value.account.role == "user"
        created = account_repo.create.call_args.args[0]
        assert created.password_hash == "bcrypt-digest"
        assert created.status == AccountStatus.ACTIVE
        code_repo.invalidate.assert_awaited_once_with(
            "buyer@example.com", VerificationPurpose.REGISTER
        )
        email_service.send_verification_code.assert_awaited_once_with(
            "buyer@example.com", "482913", VerificationPurpose.REGISTER, 300
        )

    @pytest.mark.asyncio
    async def test_register_rejects_existing_email(self, mock_logger):
        # Arrange
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = create_account()
        code_repo = AsyncMock()
        email_service = AsyncMock()
        handler = self._handler(
            account_repo, AsyncMock(), code_repo, email_service, mock_logger
        )

        # Act
        result = await handler.handle(
            Register(email="buyer@example.com", password="SecurePass1", name="Buyer")
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error == AuthFailures.EMAIL_ALREADY_EXISTS
        assert result.error.code == ApplicationErrorCode.CONFLICT
        account_repo.create.assert_not_called()
        email_service.send_verification_code.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_reports_conflict_when_insert_loses_race(
        self, mock_logger
    ):
        # Arrange
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = None
        account_repo.create.return_value = False
        role_repo = AsyncMock()
        role_repo.find_by_name.return_value = Role(id=uuid7(), name="user")
        code_repo = AsyncMock()
        handler = self._handler(
            account_repo, role_repo, code_repo, AsyncMock(), mock_logger
        )

        # Act
        result = await handler.handle(
            Register(email="buyer@example.com", password="SecurePass1", name="Buyer")
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error == AuthFailures.EMAIL_ALREADY_EXISTS
        code_repo.issue.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_fails_when_default_role_missing(self, mock_logger):
        # Arrange
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = None
        role_repo = AsyncMock()
        role_repo.find_by_name.return_value = None
        handler = self._handler(
            account_repo, role_repo, AsyncMock(), AsyncMock(), mock_logger
        )

        # Act
        result = await handler.handle(
            Register(email="buyer@example.com", password="SecurePass1", name="Buyer")
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.INTERNAL_ERROR
        account_repo.create.assert_not_called()


@pytest.mark.unit
class TestVerifyEmailHandler:
    """Test email verification."""

    @pytest.mark.asyncio
    async def test_valid_code_marks_account_verified(self, mock_logger):
        # Arrange
        account = create_account()
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = account
        code_repo = AsyncMock()
        code_repo.consume.return_value = True
        handler = VerifyEmailHandler(
            account_repo=account_repo,
            code_repo=code_repo,
            clock=create_clock(),
            logger=mock_logger,
        )

        # Act
        result = await handler.handle(
            VerifyEmail(email="buyer@example.com", code="123456")
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.message == "Email verified successfully"
        assert account.verified_at == NOW
        account_repo.update.assert_awaited_once_with(account)
        code_repo.invalidate.assert_awaited_once_with(
            "buyer@example.com", VerificationPurpose.REGISTER
        )

    @pytest.mark.asyncio
    async def test_wrong_or_expired_code_is_rejected(self, mock_logger):
        # Arrange
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = create_account()
        code_repo = AsyncMock()
        code_repo.consume.return_value = False
        handler = VerifyEmailHandler(
            account_repo=account_repo,
            code_repo=code_repo,
            clock=create_clock(),
            logger=mock_logger,
        )

        # Act
        result = await handler.handle(
            VerifyEmail(email="buyer@example.com", code="000000")
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error == AuthFailures.INVALID_VERIFICATION_CODE
        account_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_already_verified_account_is_left_unchanged(self, mock_logger):
        # Arrange
        account = create_account(verified=True)
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = account
        code_repo = AsyncMock()
        code_repo.consume.return_value = True
        handler = VerifyEmailHandler(
            account_repo=account_repo,
            code_repo=code_repo,
            clock=create_clock(),
            logger=mock_logger,
        )

        # Act
        result = await handler.handle(
            VerifyEmail(email="buyer@example.com", code="123456")
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.message == "Email already verified"
        account_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_spent_code_for_verified_account_succeeds(self, mock_logger):
        # Arrange
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = create_account(verified=True)
        code_repo = AsyncMock()
        code_repo.consume.return_value = False
        handler = VerifyEmailHandler(
            account_repo=account_repo,
            code_repo=code_repo,
            clock=create_clock(),
            logger=mock_logger,
        )

        # Act
        result = await handler.handle(
            VerifyEmail(email="buyer@example.com", code="123456")
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.message == "Email already verified"
        account_repo.update.assert_not_called()


@pytest.mark.unit
class TestResendVerificationHandler:
    """Test verification code resend and throttling."""

    def _handler(self, account_repo, code_repo, email_service, mock_logger):
        return ResendVerificationHandler(
            account_repo=account_repo,
            code_repo=code_repo,
            email_service=email_service,
            logger=mock_logger,
            code_ttl_seconds=300,
            throttle_seconds=60,
        )

    @pytest.mark.asyncio
    async def test_resend_issues_and_sends_new_code(self, mock_logger):
        # Arrange
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = create_account()
        code_repo = AsyncMock()
        code_repo.issue_unless_recent.return_value = "654321"
        email_service = AsyncMock()
        handler = self._handler(account_repo, code_repo, email_service, mock_logger)

        # Act
        result = await handler.handle(ResendVerification(email="buyer@example.com"))

        # Assert
        assert isinstance(result, Success)
        assert result.value.message == "A new verification code has been sent"
        code_repo.issue_unless_recent.assert_awaited_once_with(
            "buyer@example.com", VerificationPurpose.REGISTER, 60
        )
        email_service.send_verification_code.assert_awaited_once_with(
            "buyer@example.com", "654321", VerificationPurpose.REGISTER, 300
        )

    @pytest.mark.asyncio
    async def test_resend_within_throttle_window_is_rejected(self, mock_logger):
        # Arrange
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = create_account()
        code_repo = AsyncMock()
        code_repo.issue_unless_recent.return_value = None
        email_service = AsyncMock()
        handler = self._handler(account_repo, code_repo, email_service, mock_logger)

        # Act
        result = await handler.handle(ResendVerification(email="buyer@example.com"))

        # Assert
        assert isinstance(result, Failure)
        assert result.error == AuthFailures.VERIFICATION_THROTTLED
        assert result.error.code == ApplicationErrorCode.RATE_LIMIT_EXCEEDED
        email_service.send_verification_code.assert_not_called()

    @pytest.mark.asyncio
    async def test_resend_for_unknown_address_is_not_found(self, mock_logger):
        # Arrange
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = None
        code_repo = AsyncMock()
        handler = self._handler(account_repo, code_repo, AsyncMock(), mock_logger)

        # Act
        result = await handler.handle(ResendVerification(email="nobody@example.com"))

        # Assert
        assert isinstance(result, Failure)
        assert result.error == AuthFailures.USER_NOT_FOUND
        code_repo.issue_unless_recent.assert_not_called()

    @pytest.mark.asyncio
    async def test_resend_for_verified_account_sends_nothing(self, mock_logger):
        # Arrange
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = create_account(verified=True)
        code_repo = AsyncMock()
        handler = self._handler(account_repo, code_repo, AsyncMock(), mock_logger)

        # Act
        result = await handler.handle(ResendVerification(email="buyer@example.com"))

        # Assert
        assert isinstance(result, Success)
        assert result.value.message == "Email already verified"
        code_repo.issue_unless_recent.assert_not_called()


@pytest.mark.unit
class TestForgotPasswordHandler:
    """Test that the reset request never reveals whether an account exists."""

    def _handler(self, account_repo, code_repo, email_service, mock_logger):
        return ForgotPasswordHandler(
            account_repo=account_repo,
            code_repo=code_repo,
            email_service=email_service,
            logger=mock_logger,
        )

    @pytest.mark.asyncio
    async def test_known_account_receives_reset_code(self, mock_logger):
        # Arrange
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = create_account(verified=True)
        code_repo = AsyncMock()
        code_repo.issue_unless_recent.return_value = "111222"
        email_service = AsyncMock()
        handler = self._handler(account_repo, code_repo, email_service, mock_logger)

        # Act
        result = await handler.handle(ForgotPassword(email="buyer@example.com"))

        # Assert
        assert isinstance(result, Success)
        assert result.value.message == GENERIC_MESSAGE
        email_service.send_verification_code.assert_awaited_once_with(
            "buyer@example.com", "111222", VerificationPurpose.RESET_PASSWORD, 300
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "account",
        [
            None,
            create_account(password_hash=None),
            create_account(status=AccountStatus.BLOCKED),
        ],
        ids=["unknown", "oauth_only", "blocked"],
    )
    async def test_ineligible_accounts_get_same_message_and_no_code(
        self, account, mock_logger
    ):
        # Arrange
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = account
        code_repo = AsyncMock()
        email_service = AsyncMock()
        handler = self._handler(account_repo, code_repo, email_service, mock_logger)

        # Act
        result = await handler.handle(ForgotPassword(email="buyer@example.com"))

        # Assert
        assert isinstance(result, Success)
        assert result.value.message == GENERIC_MESSAGE
        code_repo.issue_unless_recent.assert_not_called()
        email_service.send_verification_code.assert_not_called()

    @pytest.mark.asyncio
    async def test_throttled_request_still_returns_generic_message(
        self, mock_logger
    ):
        # Arrange
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = create_account(verified=True)
        code_repo = AsyncMock()
        code_repo.issue_unless_recent.return_value = None
        email_service = AsyncMock()
        handler = self._handler(account_repo, code_repo, email_service, mock_logger)

        # Act
        result = await handler.handle(ForgotPassword(email="buyer@example.com"))

        # Assert
        assert isinstance(result, Success)
        assert result.value.message == GENERIC_MESSAGE
        email_service.send_verification_code.assert_not_called()


@pytest.mark.unit
class TestResetPasswordHandler:
    """Test password reset with a one-time code."""

    def _handler(self, account_repo, code_repo, session_repo, email_service, mock_logger):
        password_service = Mock()
        password_service.hash_password.return_value = "new-digest"
        return ResetPasswordHandler(
            account_repo=account_repo,
            code_repo=code_repo,
            session_repo=session_repo,
            password_service=password_service,
            email_service=email_service,
            logger=mock_logger,
        )

    @pytest.mark.asyncio
    async def test_reset_replaces_hash_and_revokes_all_sessions(self, mock_logger):
        # Arrange
        account = create_account(verified=True)
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = account
        code_repo = AsyncMock()
        code_repo.consume.return_value = True
        session_repo = AsyncMock()
        session_repo.deactivate_all.return_value = 3
        email_service = AsyncMock()
        handler = self._handler(
            account_repo, code_repo, session_repo, email_service, mock_logger
        )

        # Act
        result = await handler.handle(
            ResetPassword(
                email="buyer@example.com", code="123456", new_password="NewPass123"
            )
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.message == "Password reset successfully. Please sign in again"
        assert result.value.count == 3
        assert account.password_hash == "new-digest"
        session_repo.deactivate_all.assert_awaited_once_with(account.id)
        code_repo.invalidate.assert_awaited_once_with(
            "buyer@example.com", VerificationPurpose.RESET_PASSWORD
        )
        email_service.send_password_changed_notification.assert_awaited_once_with(
            "buyer@example.com"
        )

    @pytest.mark.asyncio
    async def test_invalid_code_changes_nothing(self, mock_logger):
        # Arrange
        account_repo = AsyncMock()
        code_repo = AsyncMock()
        code_repo.consume.return_value = False
        session_repo = AsyncMock()
        handler = self._handler(
            account_repo, code_repo, session_repo, AsyncMock(), mock_logger
        )

        # Act
        result = await handler.handle(
            ResetPassword(
                email="buyer@example.com", code="999999", new_password="NewPass123"
            )
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error == AuthFailures.INVALID_VERIFICATION_CODE
        account_repo.update.assert_not_called()
        session_repo.deactivate_all.assert_not_called()
