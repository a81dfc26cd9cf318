"""Device domain entity.

A device is a fingerprint of (account, browser, OS, origin address). It is
created the first time the fingerprint is seen, refreshed on every later
authentication, and deactivated (never deleted) on revocation.
"""

import hashlib
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


def derive_fingerprint(
    account_id: UUID,
    browser_name: str | None,
    os_name: str | None,
    ip_address: str | None,
) -> str:
    """Derive the stable device fingerprint.

    Args:
        account_id: Owning account.
        browser_name: Parsed browser family (version excluded).
        os_name: Parsed OS family (version excluded).
        ip_address: Originating address.

    Returns:
        str: Hex-encoded SHA-256 digest.

    Example:
        >>> derive_fingerprint(account_id, "Chrome", "Mac OS X", "10.0.0.1")
        '9f0c...'
    """
    raw = f"{account_id}-{browser_name}-{os_name}-{ip_address}"
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()


@dataclass(slots=True, kw_only=True)
class Device:
    """Tracked device.

    Attributes:
        id: Device identifier.
        account_id: Owning account.
        fingerprint: Stable SHA-256 fingerprint.
        device_name: Human-readable name ("Chrome on Mac OS X", "Apple iPhone").
        device_type: mobile, tablet, desktop or other.
        browser: "name version".
        os: "name version".
        ip_address: Last-seen originating address.
        last_active_at: Last successful authentication or refresh.
        is_active: False once revoked.
        created_at: First time the fingerprint was seen.
        active_session_count: Populated by listing queries only.
    """

    id: UUID
    account_id: UUID
    fingerprint: str
    device_name: str | None = None
    device_type: str | None = None
    browser: str | None = None
    os: str | None = None
    ip_address: str | None = None
    last_active_at: datetime | None = None
    is_active: bool = True
    created_at: datetime | None = None
    active_session_count: int = 0
