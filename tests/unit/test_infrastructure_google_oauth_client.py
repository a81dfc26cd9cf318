"""Unit tests for GoogleOAuthClient.

Tests cover:
- Consent URL parameters
- Token exchange failures (status, missing token, non-JSON body)
- Profile failures (missing subject, unverified email, non-JSON body)
- Network errors
- Successful profile mapping

Architecture:
- Google endpoints are served by httpx.MockTransport
"""

import json
from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from src.core.result import Failure, Success
from src.infrastructure.oauth.google_oauth_client import (
    TOKEN_URL,
    USERINFO_URL,
    GoogleOAuthClient,
    GoogleOAuthError,
)

PROFILE = {
    "sub": "109876543210",
    "email": "Buyer@Example.COM",
    "email_verified": True,
    "name": "Buyer",
    "picture": "https://lh3.googleusercontent.com/a/photo",
}


def google_transport(
    token_response: httpx.Response | None = None,
    profile_response: httpx.Response | None = None,
) -> httpx.MockTransport:
    """Serve the token and userinfo endpoints, recording requests."""

    def handler(request: httpx.Request) -> httpx.Response:
        handler.requests.append(request)
        if str(request.url) == TOKEN_URL:
            return token_response or httpx.Response(
                200, json={"access_token": "google-access", "token_type": "Bearer"}
            )
        if str(request.url) == USERINFO_URL:
            return profile_response or httpx.Response(200, json=PROFILE)
        return httpx.Response(404)

    handler.requests = []
    transport = httpx.MockTransport(handler)
    transport.requests = handler.requests
    return transport


def create_client(mock_logger, transport=None, client_id="client-id"):
    return GoogleOAuthClient(
        client_id=client_id,
        client_secret="client-secret",
        callback_url="http://localhost:8000/auth/google/callback",
        logger=mock_logger,
        transport=transport,
    )


@pytest.mark.unit
class TestAuthorizationUrl:
    def test_url_carries_client_and_state(self, mock_logger):
        # Act
        url = create_client(mock_logger).build_authorization_url("state-123")

        # Assert
        query = parse_qs(urlparse(url).query)
        assert url.startswith("https://accounts.google.com/o/oauth2/v2/auth?")
        assert query["client_id"] == ["client-id"]
        assert query["state"] == ["state-123"]
        assert query["response_type"] == ["code"]
        assert query["scope"] == ["openid email profile"]

    def test_missing_credentials_mean_not_configured(self, mock_logger):
        assert create_client(mock_logger, client_id=None).is_configured is False


@pytest.mark.unit
class TestFetchProfile:
    """Code exchange and userinfo lookup."""

    @pytest.mark.asyncio
    async def test_success_maps_profile(self, mock_logger):
        # Arrange
        transport = google_transport()
        client = create_client(mock_logger, transport)

        # Act
        result = await client.fetch_profile("auth-code")

        # Assert
        assert isinstance(result, Success)
        profile = result.value
        assert profile.google_id == "109876543210"
        assert profile.email == "buyer@example.com"
        assert profile.name == "Buyer"
        assert profile.avatar == PROFILE["picture"]
        token_request, profile_request = transport.requests
        assert parse_qs(token_request.content.decode())["code"] == ["auth-code"]
        assert profile_request.headers["Authorization"] == "Bearer google-access"

    @pytest.mark.asyncio
    async def test_not_configured_makes_no_request(self, mock_logger):
        # Arrange
        transport = google_transport()
        client = create_client(mock_logger, transport, client_id=None)

        # Act
        result = await client.fetch_profile("auth-code")

        # Assert
        assert result == Failure(error=GoogleOAuthError.NOT_CONFIGURED)
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_token_exchange_error_status(self, mock_logger):
        # Arrange
        transport = google_transport(
            token_response=httpx.Response(400, json={"error": "invalid_grant"})
        )
        client = create_client(mock_logger, transport)

        # Act
        result = await client.fetch_profile("expired-code")

        # Assert
        assert result == Failure(error=GoogleOAuthError.EXCHANGE_FAILED)
        assert len(transport.requests) == 1
        mock_logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_token_response_without_access_token(self, mock_logger):
        # Arrange
        transport = google_transport(
            token_response=httpx.Response(200, json={"token_type": "Bearer"})
        )
        client = create_client(mock_logger, transport)

        # Act
        result = await client.fetch_profile("auth-code")

        # Assert
        assert result == Failure(error=GoogleOAuthError.EXCHANGE_FAILED)
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_token_response_that_is_not_json(self, mock_logger):
        # Arrange
        transport = google_transport(
            token_response=httpx.Response(200, text="<html>gateway</html>")
        )
        client = create_client(mock_logger, transport)

        # Act
        result = await client.fetch_profile("auth-code")

        # Assert
        assert result == Failure(error=GoogleOAuthError.EXCHANGE_FAILED)

    @pytest.mark.asyncio
    async def test_profile_response_that_is_not_json(self, mock_logger):
        # Arrange
        transport = google_transport(
            profile_response=httpx.Response(200, text="<html>oops</html>")
        )
        client = create_client(mock_logger, transport)

        # Act
        result = await client.fetch_profile("auth-code")

        # Assert
        assert result == Failure(error=GoogleOAuthError.PROFILE_FAILED)

    @pytest.mark.asyncio
    async def test_profile_error_status(self, mock_logger):
        # Arrange
        transport = google_transport(profile_response=httpx.Response(401))
        client = create_client(mock_logger, transport)

        # Act
        result = await client.fetch_profile("auth-code")

        # Assert
        assert result == Failure(error=GoogleOAuthError.PROFILE_FAILED)

    @pytest.mark.asyncio
    async def test_unverified_email_is_rejected(self, mock_logger):
        # Arrange
        transport = google_transport(
            profile_response=httpx.Response(
                200, json={**PROFILE, "email_verified": False}
            )
        )
        client = create_client(mock_logger, transport)

        # Act
        result = await client.fetch_profile("auth-code")

        # Assert
        assert result == Failure(error=GoogleOAuthError.EMAIL_NOT_VERIFIED)

    @pytest.mark.asyncio
    async def test_profile_without_subject_is_rejected(self, mock_logger):
        # Arrange
        profile = {key: value for key, value in PROFILE.items() if key != "sub"}
        transport = google_transport(
            profile_response=httpx.Response(200, content=json.dumps(profile))
        )
        client = create_client(mock_logger, transport)

        # Act
        result = await client.fetch_profile("auth-code")

        # Assert
        assert result == Failure(error=GoogleOAuthError.PROFILE_FAILED)

    @pytest.mark.asyncio
    async def test_network_error_means_unavailable(self, mock_logger):
        # Arrange
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = create_client(mock_logger, httpx.MockTransport(refuse))

        # Act
        result = await client.fetch_profile("auth-code")

        # Assert
        assert result == Failure(error=GoogleOAuthError.UNAVAILABLE)
