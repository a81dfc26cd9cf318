"""Clock abstraction for expiry and time-window checks.

Code expiry, resend throttling, session expiry and TOTP windows all read the
current time through a Clock so tests can move time deterministically
instead of sleeping.

Usage:
    from src.core.clock import SystemClock

    clock = SystemClock()
    expires_at = clock.now() + timedelta(seconds=300)
"""

from datetime import UTC, datetime
from typing import Protocol


class Clock(Protocol):
    """Time source protocol (port)."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...


class SystemClock:
    """Wall-clock implementation of Clock."""

    def now(self) -> datetime:
        """Return datetime.now(UTC)."""
        return datetime.now(UTC)
