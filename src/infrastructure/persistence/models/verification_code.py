"""Verification code database model.

One live code per (email, purpose), enforced by a unique constraint so the
issue path can replace the previous code with a single upsert.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class VerificationCode(BaseModel):
    """Six-digit one-time code.

    Fields:
        email: Address the code was sent to
        code: Six digits
        purpose: REGISTER or RESET_PASSWORD
        expires_at: Absolute expiry
        created_at: Issue time (drives the resend throttle)
    """

    __tablename__ = "verification_codes"
    __table_args__ = (
        UniqueConstraint("email", "purpose", name="uq_verification_codes_email_purpose"),
    )

    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    code: Mapped[str] = mapped_column(String(6), nullable=False)
    purpose: Mapped[str] = mapped_column(String(32), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
