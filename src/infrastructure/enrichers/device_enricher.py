"""Device parser implementation using the user-agents library.

Parses User-Agent headers into browser, OS, device type and a
human-readable device name. Parsing is fail-open: a header that cannot be
parsed yields an empty DeviceDetails and the login continues.
"""

import logging

from user_agents import parse as parse_user_agent  # type: ignore[import-untyped]
from user_agents.parsers import UserAgent  # type: ignore[import-untyped]

from src.domain.protocols import DeviceDetails

logger = logging.getLogger(__name__)

_UNKNOWN = {"Other", ""}


class UserAgentDeviceParser:
    """Device parser backed by user-agents (ua-parser data).

    Implements DeviceParserProtocol (structural typing).

    Behavior:
        - Fail-open: returns empty result on parse errors
        - Pure string parsing, safe to call inside the event loop
    """

    def parse(self, user_agent: str) -> DeviceDetails:
        """Parse a user agent string.

        Args:
            user_agent: Raw User-Agent header.

        Returns:
            DeviceDetails, empty when the header is missing or unparseable.
        """
        if not user_agent:
            return DeviceDetails(device_type="other")

        try:
            ua: UserAgent = parse_user_agent(user_agent)
        except Exception as e:
            logger.warning(
                "user_agent_parse_failed",
                extra={"user_agent": user_agent[:100], "error": str(e)},
            )
            return DeviceDetails(device_type="other")

        browser_name = self._known(ua.browser.family)
        os_name = self._known(ua.os.family)

        return DeviceDetails(
            browser_name=browser_name,
            browser=self._with_version(browser_name, ua.browser.version_string),
            os_name=os_name,
            os=self._with_version(os_name, ua.os.version_string),
            device_type=self._determine_device_type(ua),
            device_name=self._build_device_name(ua, browser_name, os_name),
        )

    def _determine_device_type(self, ua: UserAgent) -> str:
        """Map the parsed agent to mobile, tablet, desktop or other."""
        if ua.is_mobile:
            return "mobile"
        if ua.is_tablet:
            return "tablet"
        if ua.is_pc:
            return "desktop"
        return "other"

    def _build_device_name(
        self,
        ua: UserAgent,
        browser_name: str | None,
        os_name: str | None,
    ) -> str | None:
        """Prefer the hardware name ("Apple iPhone"), else "Chrome on Mac OS X"."""
        brand = self._known(ua.device.brand)
        model = self._known(ua.device.model)
        if brand and model:
            return f"{brand} {model}"
        if browser_name and os_name:
            return f"{browser_name} on {os_name}"
        return browser_name or os_name

    @staticmethod
    def _known(value: str | None) -> str | None:
        if value is None or value in _UNKNOWN:
            return None
        return value

    @staticmethod
    def _with_version(name: str | None, version: str | None) -> str | None:
        if name is None:
            return None
        return f"{name} {version}".strip() if version else name
