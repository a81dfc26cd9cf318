"""Federated identity clients."""

from src.infrastructure.oauth.google_oauth_client import GoogleOAuthClient

__all__ = [
    "GoogleOAuthClient",
]
