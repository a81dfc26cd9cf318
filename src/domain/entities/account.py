"""Account domain entity for authentication.

Pure business logic, no framework dependencies.

Lifecycle:
    Registered-Unverified -> Verified -> (2FA-Enrolled | not)

Two-factor enrollment is a two-step process: Setup stores a *pending*
secret (totp_secret set, two_factor_enabled False), Verify flips the flag.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import AccountStatus


@dataclass(slots=True, kw_only=True)
class Account:
    """Account domain entity with authentication business rules.

    Business Rules:
        - Email verification required before password login
        - Blocked accounts cannot authenticate
        - OAuth-only accounts have no password hash
        - 2FA is enrolled only after the pending secret is confirmed

    Attributes:
        id: Unique account identifier.
        email: Unique, lower-cased address.
        name: Display name.
        role_id: Role reference (exactly one role per account).
        role_name: Denormalized role name (used in token claims).
        password_hash: bcrypt hash, None for OAuth-only accounts.
        phone_number: Optional contact number.
        avatar: Optional avatar reference.
        verified_at: When the email was verified (None until verified).
        status: Lifecycle status.
        two_factor_enabled: Whether TOTP 2FA is enrolled.
        totp_secret: Base32 TOTP secret (pending or enrolled).
        google_id: Linked Google subject id.
        created_at: When the account was created.
        updated_at: When the account was last updated.

    Example:
        >>> account = Account(id=uuid7(), email="a@x.com", name="A", role_id=role_id)
        >>> account.is_verified
        False
    """

    id: UUID
    email: str
    name: str
    role_id: UUID
    role_name: str = "user"
    password_hash: str | None = None
    phone_number: str | None = None
    avatar: str | None = None
    verified_at: datetime | None = None
    status: AccountStatus = AccountStatus.ACTIVE
    two_factor_enabled: bool = False
    totp_secret: str | None = None
    google_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_verified(self) -> bool:
        """True once the email address has been verified."""
        return self.verified_at is not None

    @property
    def is_blocked(self) -> bool:
        """True when the account has been blocked by an administrator."""
        return self.status == AccountStatus.BLOCKED

    @property
    def has_password(self) -> bool:
        """False for OAuth-only accounts."""
        return self.password_hash is not None

    @property
    def has_pending_two_factor(self) -> bool:
        """True between Setup2FA and a successful Verify2FA."""
        return self.totp_secret is not None and not self.two_factor_enabled

    def mark_verified(self, at: datetime) -> None:
        """Record email verification (no-op if already verified).

        Args:
            at: Verification timestamp.
        """
        if self.verified_at is None:
            self.verified_at = at

    def begin_two_factor_enrollment(self, secret: str) -> None:
        """Store a pending TOTP secret.

        Args:
            secret: Base32 secret generated for this enrollment.
        """
        self.totp_secret = secret
        self.two_factor_enabled = False

    def confirm_two_factor(self) -> None:
        """Flip 2FA to enrolled after the pending secret was confirmed."""
        self.two_factor_enabled = True

    def disable_two_factor(self) -> None:
        """Clear the secret and the enrolled flag."""
        self.totp_secret = None
        self.two_factor_enabled = False
