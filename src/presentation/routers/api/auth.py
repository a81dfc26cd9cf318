"""Authentication resource handlers.

Handler functions for the public authentication endpoints and the profile.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    register             - POST /auth/register
    verify_email         - POST /auth/verify-email
    resend_verification  - POST /auth/resend-verification
    forgot_password      - POST /auth/forgot-password
    reset_password       - POST /auth/reset-password
    login                - POST /auth/login
    login_two_factor     - POST /auth/2fa/login
    refresh_token        - POST /auth/refresh
    get_profile          - GET  /auth/profile
"""

from typing import Any

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands import (
    ForgotPassword,
    Login,
    LoginWithTwoFactor,
    RefreshAccessToken,
    Register,
    ResendVerification,
    ResetPassword,
    VerifyEmail,
)
from src.application.commands.handlers.forgot_password_handler import (
    ForgotPasswordHandler,
)
from src.application.commands.handlers.login_handler import LoginHandler
from src.application.commands.handlers.login_with_two_factor_handler import (
    LoginWithTwoFactorHandler,
)
from src.application.commands.handlers.refresh_token_handler import (
    RefreshAccessTokenHandler,
)
from src.application.commands.handlers.register_handler import RegisterHandler
from src.application.commands.handlers.resend_verification_handler import (
    ResendVerificationHandler,
)
from src.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from src.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)
from src.application.dtos import LoginResult
from src.application.queries import GetProfile
from src.application.queries.handlers.auth_query_handlers import GetProfileHandler
from src.core.container import (
    get_forgot_password_handler,
    get_login_handler,
    get_login_with_two_factor_handler,
    get_profile_handler,
    get_refresh_token_handler,
    get_register_handler,
    get_resend_verification_handler,
    get_reset_password_handler,
    get_verify_email_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentPrincipal,
)
from src.presentation.routers.api.responses import success_response
from src.schemas.auth_schemas import (
    AccountResponse,
    EmailRequest,
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    RefreshTokenRequest,
    RegisterRequest,
    ResetPasswordRequest,
    TokenResponse,
    TwoFactorLoginRequest,
    VerifyEmailRequest,
)
from src.schemas.common_schemas import SuccessResponse


def client_info(request: Request) -> tuple[str | None, str | None]:
    """Return (client address, User-Agent) for device fingerprinting."""
    ip_address = request.client.host if request.client else None
    return ip_address, request.headers.get("user-agent")


def to_login_response(result: LoginResult) -> LoginResponse:
    """Map the handler result to the response schema."""
    return LoginResponse(
        requires_2fa=result.requires_2fa,
        temp_token=result.temp_token,
        tokens=(
            TokenResponse.model_validate(result.tokens) if result.tokens else None
        ),
        account=(
            AccountResponse.model_validate(result.account) if result.account else None
        ),
        device_id=result.device_id,
    )


async def register(
    request: Request,
    data: RegisterRequest,
    handler: RegisterHandler = Depends(get_register_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """Create an unverified account and send a verification code.

    POST /auth/register → 201 Created

    Args:
        request: FastAPI request object.
        data: Registration data.
        handler: Registration handler (injected).

    Returns:
        Envelope with the new account on success (201 Created).
        Error envelope on failure (409 EMAIL_ALREADY_EXISTS).
    """
    command = Register(
        email=data.email,
        password=data.password,
        name=data.name,
        phone_number=data.phone_number,
    )

    match await handler.handle(command):
        case Success(value=result):
            return success_response(
                request,
                AccountResponse.model_validate(result.account),
                result.message,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def verify_email(
    request: Request,
    data: VerifyEmailRequest,
    handler: VerifyEmailHandler = Depends(get_verify_email_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """Consume a registration code. Already verified accounts get 200."""
    match await handler.handle(VerifyEmail(email=data.email, code=data.code)):
        case Success(value=result):
            return success_response(request, None, result.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def resend_verification(
    request: Request,
    data: EmailRequest,
    handler: ResendVerificationHandler = Depends(get_resend_verification_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """Reissue a registration code (429 when requested within the throttle)."""
    match await handler.handle(ResendVerification(email=data.email)):
        case Success(value=result):
            return success_response(request, None, result.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def forgot_password(
    request: Request,
    data: EmailRequest,
    handler: ForgotPasswordHandler = Depends(get_forgot_password_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """Request a password reset code.

    POST /auth/forgot-password → 200 OK

    The response is identical whether or not the address belongs to an
    account that can reset its password.
    """
    match await handler.handle(ForgotPassword(email=data.email)):
        case Success(value=result):
            return success_response(request, None, result.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def reset_password(
    request: Request,
    data: ResetPasswordRequest,
    handler: ResetPasswordHandler = Depends(get_reset_password_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """Consume a reset code, set the new password and revoke all sessions."""
    command = ResetPassword(
        email=data.email, code=data.code, new_password=data.new_password
    )
    match await handler.handle(command):
        case Success(value=result):
            return success_response(request, None, result.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def login(
    request: Request,
    data: LoginRequest,
    handler: LoginHandler = Depends(get_login_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """Password login.

    POST /auth/login → 200 OK

    Returns tokens, or ``requires_2fa`` with a pending token when the
    account has 2FA enrolled.
    """
    ip_address, user_agent = client_info(request)
    command = Login(
        email=data.email,
        password=data.password,
        ip_address=ip_address,
        user_agent=user_agent,
    )

    match await handler.handle(command):
        case Success(value=result):
            message = (
                "Two-factor authentication required"
                if result.requires_2fa
                else "Login successful"
            )
            return success_response(request, to_login_response(result), message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def login_two_factor(
    request: Request,
    data: TwoFactorLoginRequest,
    handler: LoginWithTwoFactorHandler = Depends(get_login_with_two_factor_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """Complete a 2FA login with the pending token and a TOTP code."""
    ip_address, user_agent = client_info(request)
    command = LoginWithTwoFactor(
        temp_token=data.temp_token,
        code=data.code,
        ip_address=ip_address,
        user_agent=user_agent,
    )

    match await handler.handle(command):
        case Success(value=result):
            return success_response(
                request, to_login_response(result), "Login successful"
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def refresh_token(
    request: Request,
    data: RefreshTokenRequest,
    handler: RefreshAccessTokenHandler = Depends(get_refresh_token_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """Issue a new access token. The refresh token is returned unchanged."""
    ip_address, _ = client_info(request)
    command = RefreshAccessToken(
        refresh_token=data.refresh_token, ip_address=ip_address
    )

    match await handler.handle(command):
        case Success(value=result):
            return success_response(
                request, TokenResponse.model_validate(result), "Token refreshed"
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def get_profile(
    request: Request,
    principal: CurrentPrincipal,
    handler: GetProfileHandler = Depends(get_profile_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """Return the authenticated account and its permission names."""
    match await handler.handle(GetProfile(account_id=principal.id)):
        case Success(value=summary):
            profile = ProfileResponse(
                account=AccountResponse.model_validate(summary),
                permissions=sorted(principal.permission_names),
                device_id=principal.device_id,
            )
            return success_response(request, profile)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
