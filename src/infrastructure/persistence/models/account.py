"""Account database model for authentication.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed);
      NULL for accounts created through Google login
    - totp_secret: pending or enrolled TOTP secret
    - deleted_at: soft-delete marker, filtered by every query
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel, SoftDeleteMixin
from src.infrastructure.persistence.models.role import Role


class Account(SoftDeleteMixin, BaseMutableModel):
    """Account model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at / updated_at: Timestamps (from BaseMutableModel)
        email: Unique address (lowercase)
        password_hash: bcrypt hash (nullable)
        name, phone_number, avatar: Profile fields
        verified_at: Email verification timestamp (NULL until verified)
        status: ACTIVE or BLOCKED
        two_factor_enabled: TOTP enrolled flag
        totp_secret: Base32 TOTP secret (nullable)
        google_id: Linked Google subject (unique, nullable)
        role_id: FK to roles
        deleted_at: Soft-delete marker (from SoftDeleteMixin)

    Indexes:
        - email (unique): login and registration lookups
        - google_id (unique): federated login lookups
    """

    __tablename__ = "accounts"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Account email address (unique, lowercase)",
    )
    password_hash: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Bcrypt hashed password (NULL for OAuth-only accounts)",
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    avatar: Mapped[str | None] = mapped_column(String(512), nullable=True)
    verified_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Email verification timestamp (NULL until verified)",
    )
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default="ACTIVE",
        comment="ACTIVE or BLOCKED",
    )
    two_factor_enabled: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )
    totp_secret: Mapped[str | None] = mapped_column(String(64), nullable=True)
    google_id: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        unique=True,
    )
    role_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("roles.id"),
        nullable=False,
        index=True,
    )

    role: Mapped[Role] = relationship(lazy="joined")
