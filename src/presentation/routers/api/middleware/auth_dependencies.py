"""Authentication gate.

FastAPI dependencies that turn a bearer access token into a Principal.

Gate steps:
    1. Bearer token present
    2. Signature, expiry and type == access (pending-2FA tokens rejected)
    3. Account still exists and is not blocked
    4. Role permissions resolved from the loaded policies

Any failure raises 401 INVALID_TOKEN (ACCOUNT_BLOCKED for blocked accounts).

Usage:
    @router.get("/protected")
    async def protected_route(
        principal: Principal = Depends(get_current_principal),
    ):
        return {"account_id": str(principal.id)}
"""

from typing import Annotated

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import (
    get_account_repository,
    get_logger,
    get_permission_resolver,
    get_token_service,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import TokenType
from src.domain.protocols import (
    AccountRepository,
    PermissionResolverProtocol,
    TokenClaims,
    TokenServiceProtocol,
)
from src.domain.value_objects import Principal
from src.presentation.routers.api.errors import ApiException

# auto_error=False so a missing header yields our envelope, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(message: str, code: ErrorCode = ErrorCode.INVALID_TOKEN) -> ApiException:
    return ApiException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        code=code,
        message=message,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_bearer_token(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
) -> str:
    """Raw bearer token from the Authorization header.

    Raises:
        ApiException 401: If the header is missing or not a bearer token.
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Missing bearer token")
    return credentials.credentials


async def get_current_principal(
    token: Annotated[str, Depends(get_bearer_token)],
    token_service: Annotated[TokenServiceProtocol, Depends(get_token_service)],
    account_repo: Annotated[AccountRepository, Depends(get_account_repository)],
    resolver: Annotated[
        PermissionResolverProtocol, Depends(get_permission_resolver)
    ],
) -> Principal:
    """Authenticate the request and build its Principal.

    Args:
        token: Bearer access token.
        token_service: JWT service (injected).
        account_repo: Account repository (injected).
        resolver: Permission resolver (injected).

    Returns:
        Principal with the role's current permission names.

    Raises:
        ApiException 401: If the token is invalid or expired, the account is
            gone, or the account is blocked.
    """
    match token_service.verify(token, TokenType.ACCESS):
        case Failure(error=reason):
            get_logger().info("access_token_rejected", reason=reason)
            raise _unauthorized("Invalid or expired access token")
        case Success(value=payload):
            pass

    try:
        claims = TokenClaims.from_payload(payload)
    except (KeyError, ValueError) as e:
        raise _unauthorized("Invalid token payload") from e

    account = await account_repo.find_by_id(claims.account_id)
    if account is None:
        raise _unauthorized("Invalid or expired access token")
    if account.is_blocked:
        raise _unauthorized("Account is blocked", code=ErrorCode.ACCOUNT_BLOCKED)

    return Principal(
        id=account.id,
        email=account.email,
        role=account.role_name,
        permission_names=resolver.permissions_for(account.role_name),
        device_id=claims.device_id,
    )


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
"""Annotated dependency for route signatures."""
