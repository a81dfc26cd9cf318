"""VerificationCodeRepository protocol (the code store).

At most one live code exists per (email, purpose). Issuing replaces the
previous code in a single write, and the throttled variant only replaces it
when the previous one is older than the throttle window, so two concurrent
resend requests cannot both issue.
"""

from dataclasses import dataclass, field
from typing import Protocol

from src.domain.enums import VerificationPurpose


@dataclass(frozen=True, slots=True, kw_only=True)
class VerificationCodeStatistics:
    """Snapshot of the code table.

    Attributes:
        total: All stored codes.
        expired: Codes past their expiry.
        by_purpose: Totals keyed by purpose value.
    """

    total: int
    expired: int
    by_purpose: dict[str, int] = field(default_factory=dict)


class VerificationCodeRepository(Protocol):
    """Time-boxed one-time code store.

    Methods:
        issue: Generate and store a code, replacing any previous one
        issue_unless_recent: Atomic throttle-check + issue
        consume: Look up a matching, non-expired code
        invalidate: Delete all codes for the pair
        was_issued_recently: Throttle check
        purge_expired: Delete expired codes
        statistics: Counts for administrators
    """

    async def issue(self, email: str, purpose: VerificationPurpose) -> str:
        """Generate a six-digit code, replacing prior codes for the pair.

        Returns:
            The new code.
        """
        ...

    async def issue_unless_recent(
        self, email: str, purpose: VerificationPurpose, within_seconds: int
    ) -> str | None:
        """Issue a code unless one was created within the window.

        Returns:
            The new code, or None when throttled.
        """
        ...

    async def consume(
        self, email: str, code: str, purpose: VerificationPurpose
    ) -> bool:
        """Check for a non-expired code matching all three fields.

        Does not delete; the caller invalidates after acting on success.
        """
        ...

    async def invalidate(self, email: str, purpose: VerificationPurpose) -> None:
        """Delete all codes for (email, purpose). Idempotent."""
        ...

    async def was_issued_recently(
        self, email: str, purpose: VerificationPurpose, within_seconds: int
    ) -> bool:
        """True if a code for the pair was created within the window."""
        ...

    async def purge_expired(self) -> int:
        """Delete expired codes.

        Returns:
            Number of rows deleted.
        """
        ...

    async def statistics(self) -> VerificationCodeStatistics:
        """Return code counts."""
        ...
