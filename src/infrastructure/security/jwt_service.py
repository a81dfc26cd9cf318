"""JWT token service (adapter).

Implements TokenServiceProtocol using PyJWT with HMAC-SHA256.

Token classes:
    - access: ``JWT_SECRET``, ``JWT_EXPIRES_MINUTES`` (default 15)
    - refresh: ``JWT_REFRESH_SECRET``, ``JWT_REFRESH_EXPIRES_DAYS`` (default 7)
    - pending_2fa: ``JWT_SECRET``, fixed 5 minutes, address + marker only

Two independent secrets mean a leaked access secret cannot forge refresh
tokens. Expiry is checked against the injected clock rather than the wall
clock so tests can move time deterministically.
"""

from datetime import datetime, timedelta
from typing import Any

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from src.core.clock import Clock, SystemClock
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenType
from src.domain.errors import AuthenticationError
from src.domain.protocols import TokenClaims

PENDING_TWO_FACTOR_MINUTES = 5
PENDING_TWO_FACTOR_CLAIM = "pending_2fa"
MIN_SECRET_LENGTH = 32


class JWTService:
    """JWT signing and verification for all three token classes.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        access = token_service.sign_access(
            TokenClaims(account_id=account.id, email=account.email, role="user")
        )
        result = token_service.verify(access, TokenType.ACCESS)
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_expires_minutes: int = 15,
        refresh_expires_days: int = 7,
        clock: Clock | None = None,
    ) -> None:
        """Initialize JWT service.

        Args:
            access_secret: Signs access and pending-2FA tokens.
            refresh_secret: Signs refresh tokens.
            access_expires_minutes: Access token lifetime.
            refresh_expires_days: Refresh token lifetime.
            clock: Time source (defaults to the system clock).

        Raises:
            ValueError: If a secret is shorter than 32 characters or both
                secrets are identical.
        """
        if len(access_secret) < MIN_SECRET_LENGTH:
            msg = "JWT access secret must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if len(refresh_secret) < MIN_SECRET_LENGTH:
            msg = "JWT refresh secret must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if access_secret == refresh_secret:
            msg = "JWT access and refresh secrets must differ"
            raise ValueError(msg)

        self._access_secret = access_secret
        self._refresh_secret = refresh_secret
        self._access_ttl = timedelta(minutes=access_expires_minutes)
        self._refresh_ttl = timedelta(days=refresh_expires_days)
        self._pending_ttl = timedelta(minutes=PENDING_TWO_FACTOR_MINUTES)
        self._clock = clock or SystemClock()
        self._algorithm = "HS256"

    @property
    def access_expires_in(self) -> int:
        return int(self._access_ttl.total_seconds())

    def refresh_expires_at(self, issued_at: datetime) -> datetime:
        return issued_at + self._refresh_ttl

    def sign_access(self, claims: TokenClaims) -> str:
        """Sign an access token.

        Example:
            >>> token = service.sign_access(claims)
            >>> len(token.split("."))
            3
        """
        return self._encode(
            self._identity_payload(claims),
            TokenType.ACCESS,
            self._access_secret,
            self._access_ttl,
        )

    def sign_refresh(self, claims: TokenClaims) -> str:
        """Sign a refresh token with the refresh secret.

        Every token carries a fresh ``jti``, so two refresh tokens issued in
        the same second for the same claims still differ.
        """
        return self._encode(
            self._identity_payload(claims),
            TokenType.REFRESH,
            self._refresh_secret,
            self._refresh_ttl,
        )

    def sign_pending_two_factor(self, email: str) -> str:
        """Sign a 5-minute pending-2FA token carrying only the address."""
        return self._encode(
            {"email": email, PENDING_TWO_FACTOR_CLAIM: True},
            TokenType.PENDING_2FA,
            self._access_secret,
            self._pending_ttl,
        )

    def verify(self, token: str, token_type: TokenType) -> Result[dict[str, Any], str]:
        """Verify a token of the expected class.

        Checks signature, expiry (against the injected clock) and the ``type``
        claim. Access verification also rejects any token carrying the
        pending-2FA marker.

        Returns:
            Success(payload) or Failure(AuthenticationError constant).
        """
        secret = (
            self._refresh_secret
            if token_type == TokenType.REFRESH
            else self._access_secret
        )
        match self._decode(token, secret):
            case Failure() as failure:
                return failure
            case Success(value=payload):
                pass

        if payload.get("type") != token_type.value:
            return Failure(error=AuthenticationError.WRONG_TOKEN_TYPE)
        if token_type == TokenType.ACCESS and payload.get(PENDING_TWO_FACTOR_CLAIM):
            return Failure(error=AuthenticationError.WRONG_TOKEN_TYPE)
        if token_type != TokenType.PENDING_2FA and "sub" not in payload:
            return Failure(error=AuthenticationError.INVALID_TOKEN)
        return Success(value=payload)

    def verify_pending_two_factor(self, token: str) -> Result[str, str]:
        """Verify a pending-2FA token and return its address."""
        match self.verify(token, TokenType.PENDING_2FA):
            case Failure() as failure:
                return failure
            case Success(value=payload):
                email = payload.get("email")
                if not payload.get(PENDING_TWO_FACTOR_CLAIM) or not email:
                    return Failure(error=AuthenticationError.INVALID_TOKEN)
                return Success(value=str(email))

    def _identity_payload(self, claims: TokenClaims) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "sub": str(claims.account_id),
            "email": claims.email,
            "role": claims.role,
        }
        if claims.device_id is not None:
            payload["device_id"] = str(claims.device_id)
        return payload

    def _encode(
        self,
        payload: dict[str, Any],
        token_type: TokenType,
        secret: str,
        ttl: timedelta,
    ) -> str:
        now = self._clock.now()
        body = {
            **payload,
            "type": token_type.value,
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
            "jti": str(uuid7()),
        }
        token: str = jwt.encode(body, secret, algorithm=self._algorithm)
        return token

    def _decode(self, token: str, secret: str) -> Result[dict[str, Any], str]:
        try:
            # Expiry is evaluated below against the injected clock
            payload: dict[str, Any] = jwt.decode(
                token,
                secret,
                algorithms=[self._algorithm],
                options={
                    "require": ["exp", "iat", "type"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except InvalidTokenError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)

        if not isinstance(payload["exp"], int | float):
            return Failure(error=AuthenticationError.INVALID_TOKEN)
        if self._clock.now().timestamp() >= payload["exp"]:
            return Failure(error=AuthenticationError.EXPIRED_TOKEN)
        return Success(value=payload)
