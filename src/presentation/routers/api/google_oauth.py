"""Google login handlers (browser redirects, not JSON).

Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Flow:
    1. GET /auth/google sets a random ``state`` in an HttpOnly cookie and
       redirects to Google's consent screen
    2. Google redirects back to GET /auth/google/callback with code + state
    3. The callback checks state, exchanges the code, runs GoogleLogin and
       redirects to the frontend:
       - {FRONTEND_URL}/auth/google/success?token=...&refreshToken=...
       - {FRONTEND_URL}/auth/google/error?message=...
"""

import secrets
from typing import Annotated
from urllib.parse import urlencode

from fastapi import Depends, Query, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from src.application.commands import GoogleLogin
from src.application.commands.handlers.google_login_handler import (
    GoogleLoginHandler,
)
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.core.container import (
    get_google_login_handler,
    get_google_oauth_client,
    get_logger,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.protocols import GoogleOAuthProtocol
from src.presentation.routers.api.auth import client_info
from src.presentation.routers.api.errors import ErrorResponseBuilder

STATE_COOKIE = "google_oauth_state"
STATE_COOKIE_MAX_AGE = 600


def _frontend_redirect(outcome: str, params: dict[str, str]) -> RedirectResponse:
    url = f"{settings.frontend_url}/auth/google/{outcome}?{urlencode(params)}"
    response = RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)
    response.delete_cookie(STATE_COOKIE)
    return response


def _error_redirect(message: str) -> RedirectResponse:
    return _frontend_redirect("error", {"message": message})


async def google_login(
    request: Request,
    client: GoogleOAuthProtocol = Depends(get_google_oauth_client),
) -> RedirectResponse | JSONResponse:
    """Redirect to Google's consent screen.

    GET /auth/google → 302 Found
    """
    if not client.is_configured:
        error = ApplicationError(
            code=ApplicationErrorCode.INTERNAL_ERROR,
            message="Google login is not configured",
            reason=ErrorCode.OAUTH_FAILED,
        )
        return ErrorResponseBuilder.from_application_error(error, request)

    state = secrets.token_urlsafe(32)
    response = RedirectResponse(
        url=client.build_authorization_url(state),
        status_code=status.HTTP_302_FOUND,
    )
    response.set_cookie(
        STATE_COOKIE,
        state,
        max_age=STATE_COOKIE_MAX_AGE,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
    return response


async def google_callback(
    request: Request,
    code: Annotated[str | None, Query(description="Authorization code")] = None,
    state: Annotated[str | None, Query(description="CSRF state")] = None,
    error: Annotated[str | None, Query(description="Error from Google")] = None,
    client: GoogleOAuthProtocol = Depends(get_google_oauth_client),
    handler: GoogleLoginHandler = Depends(get_google_login_handler),
) -> RedirectResponse:
    """Complete the handshake and redirect to the frontend.

    GET /auth/google/callback → 302 Found

    Args:
        request: FastAPI request (state cookie, client info).
        code: Authorization code from Google.
        state: CSRF state echoed by Google.
        error: Error code when the user denied consent.
        client: Google OAuth client (injected).
        handler: GoogleLogin handler (injected).

    Returns:
        Redirect to the frontend success or error page.
    """
    logger = get_logger()

    if error:
        logger.info("google_login_denied", error=error)
        return _error_redirect("Google sign-in was cancelled")

    expected_state = request.cookies.get(STATE_COOKIE)
    if not state or not expected_state or not secrets.compare_digest(
        state, expected_state
    ):
        logger.warning("google_login_state_mismatch")
        return _error_redirect("Invalid OAuth state")

    if not code:
        return _error_redirect("Missing authorization code")

    match await client.fetch_profile(code):
        case Failure(error=reason):
            return _error_redirect(reason)
        case Success(value=profile):
            pass

    ip_address, user_agent = client_info(request)
    command = GoogleLogin(profile=profile, ip_address=ip_address, user_agent=user_agent)

    match await handler.handle(command):
        case Failure(error=app_error):
            return _error_redirect(app_error.message)
        case Success(value=result):
            if result.tokens is None:
                return _error_redirect("Google sign-in failed")
            return _frontend_redirect(
                "success",
                {
                    "token": result.tokens.access_token,
                    "refreshToken": result.tokens.refresh_token,
                },
            )
