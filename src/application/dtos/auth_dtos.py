"""Authentication DTOs (Data Transfer Objects).

Result dataclasses returned by authentication handlers to the presentation
layer.

DTOs:
    - AccountSummary: Public view of an account
    - AuthTokens: Access + refresh token pair
    - IssuedSession: SessionIssuer result (tokens, device, session)
    - LoginResult: Login / LoginWith2FA / GoogleLogin result
    - RegistrationResult: Register result
    - RefreshResult: RefreshToken result
    - MessageResult: Flows that only report an outcome
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.entities.account import Account


@dataclass(frozen=True, kw_only=True)
class AccountSummary:
    """Public account fields (never the hash or TOTP secret).

    Attributes:
        id: Account identifier.
        email: Address.
        name: Display name.
        role: Role name.
        is_verified: Whether the address is verified.
        two_factor_enabled: Whether TOTP 2FA is enrolled.
        phone_number: Contact number.
        avatar: Avatar reference.
    """

    id: UUID
    email: str
    name: str
    role: str
    is_verified: bool
    two_factor_enabled: bool
    phone_number: str | None = None
    avatar: str | None = None

    @classmethod
    def from_account(cls, account: Account) -> "AccountSummary":
        return cls(
            id=account.id,
            email=account.email,
            name=account.name,
            role=account.role_name,
            is_verified=account.is_verified,
            two_factor_enabled=account.two_factor_enabled,
            phone_number=account.phone_number,
            avatar=account.avatar,
        )


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Token pair returned to the client.

    Attributes:
        access_token: JWT access token (short-lived).
        refresh_token: JWT refresh token (bound to a session).
        token_type: Always "bearer".
        expires_in: Access token lifetime in seconds.
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = 900


@dataclass(frozen=True, kw_only=True)
class IssuedSession:
    tokens: AuthTokens
    device_id: UUID
    session_id: UUID


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Outcome of a login step.

    Either ``requires_2fa`` is True and only ``temp_token`` is set, or a
    session was issued and ``tokens``, ``account`` and ``device_id`` are set.
    """

    requires_2fa: bool = False
    temp_token: str | None = None
    tokens: AuthTokens | None = None
    account: AccountSummary | None = None
    device_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class RegistrationResult:
    account: AccountSummary
    message: str


@dataclass(frozen=True, kw_only=True)
class RefreshResult:
    """New access token; the refresh token is returned unchanged."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = 900


@dataclass(frozen=True, kw_only=True)
class MessageResult:
    """Outcome message, with an optional affected-row count."""

    message: str
    count: int | None = None
