"""Application services shared by several handlers."""

from src.application.services.device_registry import DeviceRegistry
from src.application.services.session_issuer import SessionIssuer

__all__ = [
    "DeviceRegistry",
    "SessionIssuer",
]
