"""Google OAuth 2.0 client (adapter).

Implements GoogleOAuthProtocol with httpx:
    1. ``build_authorization_url`` sends the browser to the consent screen
    2. ``fetch_profile`` exchanges the callback code for tokens and reads the
       OpenID userinfo endpoint

Only verified Google addresses are accepted.
"""

from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

import httpx

from src.core.result import Failure, Result, Success
from src.domain.protocols import GoogleProfile

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol

AUTHORIZATION_URL = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_URL = "https://oauth2.googleapis.com/token"
USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"
SCOPES = ("openid", "email", "profile")


class GoogleOAuthError:
    """Error value constants returned inside Failure(...)."""

    NOT_CONFIGURED = "Google login is not configured"
    EXCHANGE_FAILED = "Google authorization code exchange failed"
    PROFILE_FAILED = "Could not read Google profile"
    EMAIL_NOT_VERIFIED = "Google account email is not verified"
    UNAVAILABLE = "Google is unreachable"


def _json_object(response: httpx.Response) -> dict[str, Any] | None:
    """Decoded JSON body, or None when it is not a JSON object."""
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


class GoogleOAuthClient:
    """Authorization-code flow against Google.

    Args:
        client_id: OAuth client id (None disables the flow).
        client_secret: OAuth client secret.
        callback_url: Registered redirect URI.
        logger: Structured logger.
        timeout: HTTP timeout in seconds.
        transport: Optional httpx transport (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        client_id: str | None,
        client_secret: str | None,
        callback_url: str,
        logger: "LoggerProtocol",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client_id = client_id
        self._client_secret = client_secret
        self._callback_url = callback_url
        self._logger = logger
        self._timeout = timeout
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self._client_id and self._client_secret)

    def build_authorization_url(self, state: str) -> str:
        """Consent screen URL carrying the CSRF ``state``."""
        query = urlencode(
            {
                "client_id": self._client_id or "",
                "redirect_uri": self._callback_url,
                "response_type": "code",
                "scope": " ".join(SCOPES),
                "state": state,
                "access_type": "online",
                "prompt": "select_account",
            }
        )
        return f"{AUTHORIZATION_URL}?{query}"

    async def fetch_profile(self, code: str) -> Result[GoogleProfile, str]:
        """Exchange the code and fetch the signed-in user's profile.

        Args:
            code: Authorization code from the callback query string.

        Returns:
            Success(GoogleProfile) or Failure(GoogleOAuthError constant).
        """
        if not self.is_configured:
            return Failure(error=GoogleOAuthError.NOT_CONFIGURED)

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                token_response = await client.post(
                    TOKEN_URL,
                    data={
                        "grant_type": "authorization_code",
                        "code": code,
                        "client_id": self._client_id,
                        "client_secret": self._client_secret,
                        "redirect_uri": self._callback_url,
                    },
                    headers={"Accept": "application/json"},
                )
                if token_response.status_code != 200:
                    self._logger.warning(
                        "google_token_exchange_failed",
                        status_code=token_response.status_code,
                    )
                    return Failure(error=GoogleOAuthError.EXCHANGE_FAILED)

                token_data = _json_object(token_response)
                access_token = token_data.get("access_token") if token_data else None
                if not access_token:
                    return Failure(error=GoogleOAuthError.EXCHANGE_FAILED)

                profile_response = await client.get(
                    USERINFO_URL,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
        except httpx.RequestError as e:
            self._logger.warning("google_oauth_unavailable", error=str(e))
            return Failure(error=GoogleOAuthError.UNAVAILABLE)

        if profile_response.status_code != 200:
            self._logger.warning(
                "google_profile_fetch_failed",
                status_code=profile_response.status_code,
            )
            return Failure(error=GoogleOAuthError.PROFILE_FAILED)

        profile_data = _json_object(profile_response)
        if profile_data is None:
            self._logger.warning("google_profile_not_json")
            return Failure(error=GoogleOAuthError.PROFILE_FAILED)

        return self._parse_profile(profile_data)

    def _parse_profile(self, data: dict[str, Any]) -> Result[GoogleProfile, str]:
        subject = data.get("sub")
        email = data.get("email")
        if not subject or not email:
            return Failure(error=GoogleOAuthError.PROFILE_FAILED)
        if data.get("email_verified") is False:
            return Failure(error=GoogleOAuthError.EMAIL_NOT_VERIFIED)
        return Success(
            value=GoogleProfile(
                google_id=str(subject),
                email=str(email).strip().lower(),
                name=str(data.get("name") or email.split("@")[0]),
                avatar=data.get("picture"),
            )
        )
