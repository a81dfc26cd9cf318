"""Unit tests for the security adapters.

Tests cover:
- JWTService: three token classes, two secrets, clock-driven expiry
- PyOTPTotpService: secret generation, enrollment URI/QR, drift window
- BcryptPasswordService: hash/verify, cost factor bounds, malformed hashes
"""

from datetime import timedelta

import pyotp
import pytest
from uuid_extensions import uuid7

from src.core.result import Failure, Success
from src.domain.enums import TokenType
from src.domain.errors import AuthenticationError
from src.domain.protocols import TokenClaims
from src.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.totp_service import PyOTPTotpService

ACCESS_SECRET = "access-secret-for-tests-0123456789abcdef"
REFRESH_SECRET = "refresh-secret-for-tests-0123456789abcdef"


@pytest.fixture
def jwt_service(frozen_clock):
    return JWTService(
        access_secret=ACCESS_SECRET,
        refresh_secret=REFRESH_SECRET,
        access_expires_minutes=15,
        refresh_expires_days=7,
        clock=frozen_clock,
    )


@pytest.fixture
def claims():
    return TokenClaims(
        account_id=uuid7(),
        email="buyer@example.com",
        role="user",
        device_id=uuid7(),
    )


@pytest.mark.unit
class TestJWTServiceConstruction:
    """Test secret validation."""

    def test_short_secret_is_rejected(self):
        with pytest.raises(ValueError, match="at least 32"):
            JWTService(access_secret="short", refresh_secret=REFRESH_SECRET)

    def test_identical_secrets_are_rejected(self):
        with pytest.raises(ValueError, match="must differ"):
            JWTService(access_secret=ACCESS_SECRET, refresh_secret=ACCESS_SECRET)

    def test_access_expires_in_reports_seconds(self, jwt_service):
        assert jwt_service.access_expires_in == 900


@pytest.mark.unit
class TestJWTServiceTokens:
    """Test signing and verification of each token class."""

    def test_access_token_round_trip_carries_identity(self, jwt_service, claims):
        # Act
        token = jwt_service.sign_access(claims)
        result = jwt_service.verify(token, TokenType.ACCESS)

        # Assert
        assert isinstance(result, Success)
        assert result.value["sub"] == str(claims.account_id)
        assert result.value["role"] == "user"
        assert result.value["device_id"] == str(claims.device_id)
        assert result.value["type"] == "access"
        assert TokenClaims.from_payload(result.value) == claims

    def test_every_token_is_unique(self, jwt_service, claims):
        assert jwt_service.sign_refresh(claims) != jwt_service.sign_refresh(claims)

    def test_refresh_token_is_not_accepted_as_access(self, jwt_service, claims):
        # Arrange
        refresh = jwt_service.sign_refresh(claims)

        # Act
        result = jwt_service.verify(refresh, TokenType.ACCESS)

        # Assert
        assert result == Failure(error=AuthenticationError.INVALID_TOKEN)

    def test_access_token_is_not_accepted_as_refresh(self, jwt_service, claims):
        # Arrange
        access = jwt_service.sign_access(claims)

        # Act
        result = jwt_service.verify(access, TokenType.REFRESH)

        # Assert
        assert isinstance(result, Failure)

    def test_pending_token_is_not_accepted_as_access(self, jwt_service):
        # Arrange
        pending = jwt_service.sign_pending_two_factor("buyer@example.com")

        # Act
        result = jwt_service.verify(pending, TokenType.ACCESS)

        # Assert
        assert result == Failure(error=AuthenticationError.WRONG_TOKEN_TYPE)

    def test_pending_token_carries_only_address(self, jwt_service):
        # Arrange
        pending = jwt_service.sign_pending_two_factor("buyer@example.com")

        # Act
        result = jwt_service.verify(pending, TokenType.PENDING_2FA)

        # Assert
        assert isinstance(result, Success)
        assert result.value["email"] == "buyer@example.com"
        assert result.value["pending_2fa"] is True
        assert "sub" not in result.value

    def test_access_token_expires_with_clock(self, jwt_service, frozen_clock, claims):
        # Arrange
        token = jwt_service.sign_access(claims)

        # Act
        frozen_clock.advance(minutes=14, seconds=59)
        still_valid = jwt_service.verify(token, TokenType.ACCESS)
        frozen_clock.advance(seconds=1)
        expired = jwt_service.verify(token, TokenType.ACCESS)

        # Assert
        assert isinstance(still_valid, Success)
        assert expired == Failure(error=AuthenticationError.EXPIRED_TOKEN)

    def test_pending_token_lives_five_minutes(self, jwt_service, frozen_clock):
        # Arrange
        pending = jwt_service.sign_pending_two_factor("buyer@example.com")

        # Act
        frozen_clock.advance(minutes=5)
        result = jwt_service.verify_pending_two_factor(pending)

        # Assert
        assert result == Failure(error=AuthenticationError.EXPIRED_TOKEN)

    def test_token_signed_with_other_secret_is_invalid(self, claims, frozen_clock):
        # Arrange
        other = JWTService(
            access_secret="another-access-secret-0123456789abcdef",
            refresh_secret=REFRESH_SECRET,
            clock=frozen_clock,
        )
        verifier = JWTService(
            access_secret=ACCESS_SECRET,
            refresh_secret=REFRESH_SECRET,
            clock=frozen_clock,
        )

        # Act
        result = verifier.verify(other.sign_access(claims), TokenType.ACCESS)

        # Assert
        assert result == Failure(error=AuthenticationError.INVALID_TOKEN)

    def test_garbage_is_invalid(self, jwt_service):
        result = jwt_service.verify("not-a-jwt", TokenType.ACCESS)

        assert result == Failure(error=AuthenticationError.INVALID_TOKEN)


@pytest.mark.unit
class TestPyOTPTotpService:
    """Test TOTP generation and verification."""

    @pytest.fixture
    def totp(self, frozen_clock):
        return PyOTPTotpService(issuer="Storefront", clock=frozen_clock)

    def test_generated_secret_is_32_base32_chars(self, totp):
        secret = totp.generate_secret()

        assert len(secret) == 32
        assert set(secret) <= set("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567")

    def test_current_code_verifies(self, totp):
        # Arrange
        secret = totp.generate_secret()

        # Act
        code = totp.current_code(secret)

        # Assert
        assert len(code) == 6
        assert totp.verify_code(secret, code) is True

    def test_code_from_previous_period_is_accepted(self, totp, frozen_clock):
        # Arrange
        secret = totp.generate_secret()
        code = totp.current_code(secret)

        # Act
        frozen_clock.advance(seconds=30)

        # Assert
        assert totp.verify_code(secret, code) is True

    def test_code_from_next_period_is_accepted(self, totp, frozen_clock):
        # Arrange
        secret = totp.generate_secret()
        next_code = pyotp.TOTP(secret).at(frozen_clock.now() + timedelta(seconds=30))

        # Act / Assert
        assert totp.verify_code(secret, next_code) is True

    def test_code_two_periods_ahead_is_rejected(self, totp, frozen_clock):
        # Arrange
        secret = totp.generate_secret()
        future_code = pyotp.TOTP(secret).at(frozen_clock.now() + timedelta(seconds=60))

        # Act / Assert
        assert totp.verify_code(secret, future_code) is False

    def test_code_two_periods_old_is_rejected(self, totp, frozen_clock):
        # Arrange
        secret = totp.generate_secret()
        code = totp.current_code(secret)

        # Act
        frozen_clock.advance(seconds=60)

        # Assert
        assert totp.verify_code(secret, code) is False

    @pytest.mark.parametrize("code", ["", "12345", "1234567", "12a456"])
    def test_malformed_codes_are_rejected(self, totp, code):
        assert totp.verify_code(totp.generate_secret(), code) is False

    def test_enrollment_contains_uri_and_qr_code(self, totp):
        # Arrange
        secret = totp.generate_secret()

        # Act
        enrollment = totp.build_enrollment("buyer@example.com", secret)

        # Assert
        assert enrollment.secret == secret
        assert enrollment.otpauth_url.startswith("otpauth://totp/")
        assert f"secret={secret}" in enrollment.otpauth_url
        assert "issuer=Storefront" in enrollment.otpauth_url
        assert enrollment.qr_code.startswith("data:image/png;base64,")


@pytest.mark.unit
class TestBcryptPasswordService:
    """Test password hashing."""

    @pytest.fixture
    def password_service(self):
        return BcryptPasswordService(cost_factor=10)

    def test_hash_then_verify(self, password_service):
        digest = password_service.hash_password("SecurePass123")

        assert digest.startswith("$2b$10$")
        assert password_service.verify_password("SecurePass123", digest) is True
        assert password_service.verify_password("WrongPass123", digest) is False

    def test_same_password_gets_different_salts(self, password_service):
        assert password_service.hash_password("SecurePass123") != (
            password_service.hash_password("SecurePass123")
        )

    def test_malformed_hash_does_not_raise(self, password_service):
        assert password_service.verify_password("SecurePass123", "not-bcrypt") is False

    @pytest.mark.parametrize("cost", [9, 16])
    def test_cost_factor_outside_range_is_rejected(self, cost):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost)
