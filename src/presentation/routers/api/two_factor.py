"""Two-factor enrollment handlers.

Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    setup_two_factor    - POST   /auth/2fa/setup
    verify_two_factor   - POST   /auth/2fa/verify
    disable_two_factor  - DELETE /auth/2fa/disable
    two_factor_status   - GET    /auth/2fa/status
"""

from typing import Any

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands import (
    DisableTwoFactor,
    SetupTwoFactor,
    VerifyTwoFactor,
)
from src.application.commands.handlers.two_factor_handlers import (
    DisableTwoFactorHandler,
    SetupTwoFactorHandler,
    VerifyTwoFactorHandler,
)
from src.application.queries import GetTwoFactorStatus
from src.application.queries.handlers.auth_query_handlers import (
    GetTwoFactorStatusHandler,
)
from src.core.container import (
    get_disable_two_factor_handler,
    get_setup_two_factor_handler,
    get_two_factor_status_handler,
    get_verify_two_factor_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentPrincipal,
)
from src.presentation.routers.api.responses import success_response
from src.schemas.common_schemas import SuccessResponse
from src.schemas.two_factor_schemas import (
    TwoFactorCodeRequest,
    TwoFactorDisableRequest,
    TwoFactorSetupResponse,
    TwoFactorStatusResponse,
)


async def setup_two_factor(
    request: Request,
    principal: CurrentPrincipal,
    handler: SetupTwoFactorHandler = Depends(get_setup_two_factor_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """Begin enrollment: returns the secret, otpauth URI and QR code.

    2FA stays disabled until POST /auth/2fa/verify succeeds.
    """
    match await handler.handle(SetupTwoFactor(account_id=principal.id)):
        case Success(value=enrollment):
            return success_response(
                request,
                TwoFactorSetupResponse.model_validate(enrollment),
                "Scan the QR code, then confirm with a code from your app",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def verify_two_factor(
    request: Request,
    data: TwoFactorCodeRequest,
    principal: CurrentPrincipal,
    handler: VerifyTwoFactorHandler = Depends(get_verify_two_factor_handler),
) -> SuccessResponse[Any] | JSONResponse:
    command = VerifyTwoFactor(account_id=principal.id, code=data.code)
    match await handler.handle(command):
        case Success(value=result):
            return success_response(request, None, result.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def disable_two_factor(
    request: Request,
    data: TwoFactorDisableRequest,
    principal: CurrentPrincipal,
    handler: DisableTwoFactorHandler = Depends(get_disable_two_factor_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """Disable 2FA. Requires the password and a current TOTP code."""
    command = DisableTwoFactor(
        account_id=principal.id, password=data.password, code=data.code
    )
    match await handler.handle(command):
        case Success(value=result):
            return success_response(request, None, result.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def two_factor_status(
    request: Request,
    principal: CurrentPrincipal,
    handler: GetTwoFactorStatusHandler = Depends(get_two_factor_status_handler),
) -> SuccessResponse[Any] | JSONResponse:
    match await handler.handle(GetTwoFactorStatus(account_id=principal.id)):
        case Success(value=status):
            return success_response(
                request, TwoFactorStatusResponse.model_validate(status)
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
