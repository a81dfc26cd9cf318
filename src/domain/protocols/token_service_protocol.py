"""Token issuing protocol (port).

Three token classes are issued:
    - access: short-lived, signed with the access secret
    - refresh: long-lived, signed with a separate refresh secret
    - pending_2fa: 5 minutes, signed with the access secret, carries only the
      address and a marker flag; never accepted as an access token

Infrastructure implements this with PyJWT (JWTService).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.enums import TokenType


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenClaims:
    """Identity claims carried by access and refresh tokens.

    Attributes:
        account_id: Subject id.
        email: Account address.
        role: Role name.
        device_id: Bound device (None for device-less tokens).
    """

    account_id: UUID
    email: str
    role: str
    device_id: UUID | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "TokenClaims":
        """Rebuild claims from a verified token payload.

        Raises:
            KeyError: If a required claim is missing.
            ValueError: If an id claim is not a UUID.
        """
        device_raw = payload.get("device_id")
        return cls(
            account_id=UUID(str(payload["sub"])),
            email=str(payload["email"]),
            role=str(payload["role"]),
            device_id=UUID(str(device_raw)) if device_raw else None,
        )


class TokenServiceProtocol(Protocol):
    """Signs and verifies access, refresh and pending-2FA tokens."""

    @property
    def access_expires_in(self) -> int:
        """Access token lifetime in seconds."""
        ...

    def sign_access(self, claims: TokenClaims) -> str:
        """Sign a short-lived access token."""
        ...

    def sign_refresh(self, claims: TokenClaims) -> str:
        """Sign a long-lived refresh token with the refresh secret."""
        ...

    def refresh_expires_at(self, issued_at: datetime) -> datetime:
        """Absolute expiry for a refresh token (and its session)."""
        ...

    def sign_pending_two_factor(self, email: str) -> str:
        """Sign a 5-minute pending-2FA token carrying only the address."""
        ...

    def verify(self, token: str, token_type: TokenType) -> Result[dict[str, Any], str]:
        """Verify signature, expiry and token class.

        Returns:
            Success(payload) or Failure(AuthenticationError constant).
        """
        ...

    def verify_pending_two_factor(self, token: str) -> Result[str, str]:
        """Verify a pending-2FA token.

        Returns:
            Success(email) or Failure(AuthenticationError constant).
        """
        ...
