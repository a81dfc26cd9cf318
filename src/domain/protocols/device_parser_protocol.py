"""User agent parsing protocol (port).

Infrastructure implements this with the user-agents library
(UserAgentDeviceEnricher).
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True, kw_only=True)
class DeviceDetails:
    """Parsed device metadata.

    Attributes:
        browser_name: Browser family ("Chrome"), used in the fingerprint.
        browser: "name version".
        os_name: OS family ("Mac OS X"), used in the fingerprint.
        os: "name version".
        device_type: mobile, tablet, desktop or other.
        device_name: "brand model" or "browser on os".
    """

    browser_name: str | None = None
    browser: str | None = None
    os_name: str | None = None
    os: str | None = None
    device_type: str = "desktop"
    device_name: str | None = None


class DeviceParserProtocol(Protocol):
    """Turns a raw User-Agent header into DeviceDetails."""

    def parse(self, user_agent: str) -> DeviceDetails:
        """Parse a user agent string (empty result on failure)."""
        ...
