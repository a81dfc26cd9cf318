"""Google OAuth client protocol (port)."""

from dataclasses import dataclass
from typing import Protocol

from src.core.result import Result


@dataclass(frozen=True, slots=True, kw_only=True)
class GoogleProfile:
    """Identity asserted by Google.

    Attributes:
        google_id: Google subject id.
        email: Verified address.
        name: Display name.
        avatar: Profile picture URL.
    """

    google_id: str
    email: str
    name: str
    avatar: str | None = None


class GoogleOAuthProtocol(Protocol):
    """Authorization-code handshake with Google."""

    @property
    def is_configured(self) -> bool:
        """False when client id or secret is missing."""
        ...

    def build_authorization_url(self, state: str) -> str:
        """Return the consent screen URL for the given CSRF state."""
        ...

    async def fetch_profile(self, code: str) -> Result[GoogleProfile, str]:
        """Exchange the authorization code and fetch the user profile."""
        ...
