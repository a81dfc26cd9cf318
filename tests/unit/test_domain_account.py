"""Unit tests for the Account, Session, VerificationCode and Role entities.

Tests cover:
- Account lifecycle (verification, blocking, two-factor enrollment)
- Session usability invariant
- Verification code expiry
- Role permission names (inactive roles grant nothing)
- Shared validators used by request schemas and commands
"""

from datetime import UTC, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from src.domain.entities.account import Account
from src.domain.entities.role import Permission, Role
from src.domain.entities.session import Session
from src.domain.entities.verification_code import VerificationCode
from src.domain.enums import AccountStatus, VerificationPurpose
from src.domain.validators import (
    validate_email,
    validate_phone_number,
    validate_six_digit_code,
    validate_strong_password,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def create_account(**overrides) -> Account:
    fields = {
        "id": uuid7(),
        "email": "buyer@example.com",
        "name": "Buyer",
        "role_id": uuid7(),
        "password_hash": "hashed",
    }
    fields.update(overrides)
    return Account(**fields)


@pytest.mark.unit
class TestAccountEntity:
    """Test account business rules."""

    def test_new_account_is_unverified_and_active(self):
        account = create_account()

        assert account.is_verified is False
        assert account.is_blocked is False
        assert account.status == AccountStatus.ACTIVE
        assert account.role_name == "user"

    def test_mark_verified_keeps_first_timestamp(self):
        # Arrange
        account = create_account()

        # Act
        account.mark_verified(NOW)
        account.mark_verified(NOW + timedelta(days=1))

        # Assert
        assert account.verified_at == NOW
        assert account.is_verified is True

    def test_blocked_status(self):
        assert create_account(status=AccountStatus.BLOCKED).is_blocked is True

    def test_oauth_only_account_has_no_password(self):
        assert create_account(password_hash=None).has_password is False

    def test_two_factor_enrollment_lifecycle(self):
        # Arrange
        account = create_account()

        # Act / Assert
        account.begin_two_factor_enrollment("SECRET")
        assert account.has_pending_two_factor is True
        assert account.two_factor_enabled is False

        account.confirm_two_factor()
        assert account.has_pending_two_factor is False
        assert account.two_factor_enabled is True

        account.disable_two_factor()
        assert account.totp_secret is None
        assert account.two_factor_enabled is False


@pytest.mark.unit
class TestSessionEntity:
    """Test the session usability invariant."""

    def _session(self, is_active: bool = True) -> Session:
        return Session(
            id=uuid7(),
            account_id=uuid7(),
            device_id=uuid7(),
            access_token="access",
            refresh_token="refresh",
            expires_at=NOW + timedelta(days=7),
            is_active=is_active,
        )

    def test_active_unexpired_session_is_usable(self):
        assert self._session().is_usable(NOW) is True

    def test_session_is_unusable_at_expiry(self):
        assert self._session().is_usable(NOW + timedelta(days=7)) is False

    def test_inactive_session_is_unusable(self):
        assert self._session(is_active=False).is_usable(NOW) is False


@pytest.mark.unit
class TestVerificationCode:
    def test_expiry_boundary(self):
        code = VerificationCode(
            id=uuid7(),
            email="buyer@example.com",
            code="123456",
            purpose=VerificationPurpose.REGISTER,
            expires_at=NOW + timedelta(seconds=300),
            created_at=NOW,
        )

        assert code.is_expired(NOW + timedelta(seconds=299)) is False
        assert code.is_expired(NOW + timedelta(seconds=300)) is True


@pytest.mark.unit
class TestRole:
    def test_permission_names(self):
        permission = Permission(
            id=uuid7(), name="users.update", path="/admin", method="PATCH"
        )

        active = Role(id=uuid7(), name="admin", permissions=(permission,))
        inactive = Role(
            id=uuid7(), name="admin", is_active=False, permissions=(permission,)
        )

        assert active.permission_names == frozenset({"users.update"})
        assert inactive.permission_names == frozenset()


@pytest.mark.unit
class TestValidators:
    """Test the shared validation functions."""

    def test_email_is_normalized(self):
        assert validate_email("  Buyer@Example.COM ") == "buyer@example.com"

    @pytest.mark.parametrize("value", ["no-at-sign", "a@b", "a b@example.com"])
    def test_invalid_email(self, value):
        with pytest.raises(ValueError):
            validate_email(value)

    @pytest.mark.parametrize(
        "value", ["Ab1", "alllowercase1", "ALLUPPERCASE1", "NoDigitsHere"]
    )
    def test_weak_passwords(self, value):
        with pytest.raises(ValueError):
            validate_strong_password(value)

    def test_password_at_byte_limit_is_accepted(self):
        password = "Aa1" + "x" * 69

        assert validate_strong_password(password) == password

    @pytest.mark.parametrize(
        "value",
        [
            "Aa1" + "x" * 70,
            "Aa1" + "\u00e9" * 35,
            "Aa1" + "\u5bc6" * 24,
        ],
    )
    def test_passwords_longer_than_72_bytes(self, value):
        with pytest.raises(ValueError, match="72 bytes"):
            validate_strong_password(value)

    def test_six_digit_code(self):
        assert validate_six_digit_code(" 123456 ") == "123456"
        with pytest.raises(ValueError):
            validate_six_digit_code("12345a")

    def test_phone_number_separators_are_stripped(self):
        assert validate_phone_number("+84 (90) 123-4567") == "+84901234567"
