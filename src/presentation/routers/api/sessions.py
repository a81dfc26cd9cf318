"""Session and device handlers.

Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_sessions       - GET    /auth/sessions
    logout              - DELETE /auth/sessions/{refresh_token}
    logout_all_devices  - DELETE /auth/sessions
    list_devices        - GET    /auth/devices
    revoke_device       - DELETE /auth/devices/{device_id}
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands import Logout, LogoutAllDevices, RevokeDevice
from src.application.commands.handlers.logout_handler import (
    LogoutAllDevicesHandler,
    LogoutHandler,
)
from src.application.commands.handlers.revoke_device_handler import (
    RevokeDeviceHandler,
)
from src.application.queries import ListDevices, ListSessions
from src.application.queries.handlers.auth_query_handlers import (
    ListDevicesHandler,
    ListSessionsHandler,
)
from src.core.container import (
    get_list_devices_handler,
    get_list_sessions_handler,
    get_logout_all_devices_handler,
    get_logout_handler,
    get_revoke_device_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentPrincipal,
    get_bearer_token,
)
from src.presentation.routers.api.responses import success_response
from src.schemas.common_schemas import CountResponse, SuccessResponse
from src.schemas.session_schemas import DeviceResponse, SessionResponse


async def list_sessions(
    request: Request,
    principal: CurrentPrincipal,
    access_token: Annotated[str, Depends(get_bearer_token)],
    handler: ListSessionsHandler = Depends(get_list_sessions_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """List active sessions, most recently used first.

    The session holding the calling access token is flagged ``is_current``.
    """
    query = ListSessions(account_id=principal.id, current_access_token=access_token)
    match await handler.handle(query):
        case Success(value=sessions):
            return success_response(
                request, [SessionResponse.model_validate(s) for s in sessions]
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def logout(
    request: Request,
    principal: CurrentPrincipal,
    refresh_token: Annotated[str, Path(min_length=1, description="Refresh token")],
    handler: LogoutHandler = Depends(get_logout_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """Deactivate one of the caller's sessions (idempotent)."""
    command = Logout(account_id=principal.id, refresh_token=refresh_token)
    match await handler.handle(command):
        case Success(value=result):
            return success_response(
                request, CountResponse(count=result.count or 0), result.message
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def logout_all_devices(
    request: Request,
    principal: CurrentPrincipal,
    handler: LogoutAllDevicesHandler = Depends(get_logout_all_devices_handler),
) -> SuccessResponse[Any] | JSONResponse:
    match await handler.handle(LogoutAllDevices(account_id=principal.id)):
        case Success(value=result):
            return success_response(
                request, CountResponse(count=result.count or 0), result.message
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def list_devices(
    request: Request,
    principal: CurrentPrincipal,
    handler: ListDevicesHandler = Depends(get_list_devices_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """List active devices with their live session counts."""
    match await handler.handle(ListDevices(account_id=principal.id)):
        case Success(value=devices):
            return success_response(
                request, [DeviceResponse.model_validate(d) for d in devices]
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


async def revoke_device(
    request: Request,
    principal: CurrentPrincipal,
    device_id: Annotated[UUID, Path(description="Device ID")],
    handler: RevokeDeviceHandler = Depends(get_revoke_device_handler),
) -> SuccessResponse[Any] | JSONResponse:
    """Deactivate every session of the device, then the device itself."""
    command = RevokeDevice(account_id=principal.id, device_id=device_id)
    match await handler.handle(command):
        case Success(value=result):
            return success_response(
                request, CountResponse(count=result.count or 0), result.message
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
