"""Request enrichers infrastructure package.

Enrichers:
    - UserAgentDeviceParser: Parses user agent strings (uses user-agents library)
"""

from src.infrastructure.enrichers.device_enricher import UserAgentDeviceParser

__all__ = [
    "UserAgentDeviceParser",
]
