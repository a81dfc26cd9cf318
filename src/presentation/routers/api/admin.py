"""Administrative handlers (permission-gated).

Routes are registered via ROUTE_REGISTRY in routes/registry.py, which
declares the permission names each one requires.

Handlers:
    update_account_status        - PATCH  /admin/accounts/{account_id}/status
    purge_expired_codes          - DELETE /admin/verification-codes/expired
    verification_code_statistics - GET    /admin/verification-codes/statistics
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands import PurgeExpiredCodes, UpdateAccountStatus
from src.application.commands.handlers.admin_handlers import (
    PurgeExpiredCodesHandler,
    UpdateAccountStatusHandler,
)
from src.application.queries import GetVerificationCodeStatistics
from src.application.queries.handlers.auth_query_handlers import (
    GetVerificationCodeStatisticsHandler,
)
from src.core.container import (
    get_purge_expired_codes_handler,
    get_update_account_status_handler,
    get_verification_code_statistics_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentPrincipal,
)
from src.presentation.routers.api.responses import success_response
from src.schemas.admin_schemas import (
    AccountStatusUpdateRequest,
    VerificationCodeStatisticsResponse,
)
from src.schemas.common_schemas import CountResponse, SuccessResponse


async def update_account_status(
    request: Request,
    data: AccountStatusUpdateRequest,
    principal: CurrentPrincipal,
    account_id: Annotated[UUID, Path(description="Target account ID")],
    handler: UpdateAccountStatusHandler = Depends(get_update_account_status_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """Set ACTIVE or BLOCKED. Blocking revokes every session of the account."""
    command = UpdateAccountStatus(
        account_id=account_id, status=data.status, actor_id=principal.id
    )
    match await handler.handle(command):
        case Success(value=result):
            return success_response(
                request, CountResponse(count=result.count or 0), result.message
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def purge_expired_codes(
    request: Request,
    principal: CurrentPrincipal,
    handler: PurgeExpiredCodesHandler = Depends(get_purge_expired_codes_handler),
) -> SuccessResponse[Any] | JSONResponse:
    match await handler.handle(PurgeExpiredCodes(actor_id=principal.id)):
        case Success(value=result):
            return success_response(
                request, CountResponse(count=result.count or 0), result.message
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def verification_code_statistics(
    request: Request,
    handler: GetVerificationCodeStatisticsHandler = Depends(
        get_verification_code_statistics_handler
    ),
) -> SuccessResponse[Any] | JSONResponse:
    match await handler.handle(GetVerificationCodeStatistics()):
        case Success(value=stats):
            return success_response(
                request, VerificationCodeStatisticsResponse.model_validate(stats)
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
