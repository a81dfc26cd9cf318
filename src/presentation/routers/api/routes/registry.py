"""API Route Registry - Single Source of Truth.

This module defines ALL API endpoints as declarative metadata. Routes are
generated automatically from this registry; handlers never carry their own
decorators.

Structure:
    - Authentication (public): register, email verification, passwords, login
    - Sessions & devices (authenticated)
    - Two-factor enrollment (authenticated)
    - Google login (public, browser redirects)
    - Administration (authorized by permission names)

Usage:
    from src.presentation.routers.api.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.routes.generator import register_routes_from_registry

    router = APIRouter()
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from typing import Any

from src.presentation.routers.api.admin import (
    purge_expired_codes,
    update_account_status,
    verification_code_statistics,
)
from src.presentation.routers.api.auth import (
    forgot_password,
    get_profile,
    login,
    login_two_factor,
    refresh_token,
    register,
    resend_verification,
    reset_password,
    verify_email,
)
from src.presentation.routers.api.google_oauth import google_callback, google_login
from src.presentation.routers.api.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.presentation.routers.api.sessions import (
    list_devices,
    list_sessions,
    logout,
    logout_all_devices,
    revoke_device,
)
from src.presentation.routers.api.two_factor import (
    disable_two_factor,
    setup_two_factor,
    two_factor_status,
    verify_two_factor,
)
from src.schemas.admin_schemas import VerificationCodeStatisticsResponse
from src.schemas.auth_schemas import (
    AccountResponse,
    LoginResponse,
    ProfileResponse,
    TokenResponse,
)
from src.schemas.common_schemas import CountResponse, SuccessResponse
from src.schemas.session_schemas import DeviceResponse, SessionResponse
from src.schemas.two_factor_schemas import (
    TwoFactorSetupResponse,
    TwoFactorStatusResponse,
)

PUBLIC = AuthPolicy(level=AuthLevel.PUBLIC)
AUTHENTICATED = AuthPolicy(level=AuthLevel.AUTHENTICATED)

MessageOnly: Any = SuccessResponse[None]

_UNAUTHORIZED = ErrorSpec(status=401, description="Missing or invalid access token")
_FORBIDDEN = ErrorSpec(status=403, description="Missing required permission")
_VALIDATION = ErrorSpec(status=422, description="Request validation failed")

# =============================================================================
# Route Registry (Single Source of Truth)
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Authentication (public)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/register",
        handler=register,
        resource="auth",
        tags=["Auth"],
        summary="Register",
        description="Create an unverified account and email a verification code.",
        operation_id="register",
        response_model=SuccessResponse[AccountResponse],
        status_code=201,
        errors=[
            ErrorSpec(status=409, description="Email already registered"),
            _VALIDATION,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/verify-email",
        handler=verify_email,
        resource="auth",
        tags=["Auth"],
        summary="Verify email",
        description="Consume the registration code and mark the account verified.",
        operation_id="verify_email",
        response_model=MessageOnly,
        errors=[
            ErrorSpec(status=400, description="Invalid or expired code"),
            ErrorSpec(status=404, description="Account not found"),
            _VALIDATION,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/resend-verification",
        handler=resend_verification,
        resource="auth",
        tags=["Auth"],
        summary="Resend verification code",
        operation_id="resend_verification",
        response_model=MessageOnly,
        errors=[
            ErrorSpec(status=404, description="Account not found"),
            ErrorSpec(status=429, description="Code requested too recently"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/forgot-password",
        handler=forgot_password,
        resource="auth",
        tags=["Auth"],
        summary="Forgot password",
        description="Email a reset code. The response never reveals whether "
        "the address is registered.",
        operation_id="forgot_password",
        response_model=MessageOnly,
        errors=[_VALIDATION],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/reset-password",
        handler=reset_password,
        resource="auth",
        tags=["Auth"],
        summary="Reset password",
        description="Consume the reset code, set the new password and sign "
        "out every session.",
        operation_id="reset_password",
        response_model=MessageOnly,
        errors=[
            ErrorSpec(status=400, description="Invalid or expired code"),
            _VALIDATION,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/login",
        handler=login,
        resource="auth",
        tags=["Auth"],
        summary="Login",
        description="Verify credentials. Returns tokens, or a short-lived "
        "pending token when two-factor authentication is enabled.",
        operation_id="login",
        response_model=SuccessResponse[LoginResponse],
        errors=[
            ErrorSpec(
                status=401,
                description="Invalid credentials, unverified email or blocked account",
            ),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/2fa/login",
        handler=login_two_factor,
        resource="auth",
        tags=["Auth"],
        summary="Complete two-factor login",
        operation_id="login_two_factor",
        response_model=SuccessResponse[LoginResponse],
        errors=[
            ErrorSpec(status=401, description="Invalid pending token or code"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/refresh",
        handler=refresh_token,
        resource="auth",
        tags=["Auth"],
        summary="Refresh access token",
        description="Issue a new access token for a live session. The refresh "
        "token itself is not rotated.",
        operation_id="refresh_token",
        response_model=SuccessResponse[TokenResponse],
        errors=[
            ErrorSpec(status=401, description="Invalid, expired or revoked refresh token"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/auth/profile",
        handler=get_profile,
        resource="auth",
        tags=["Auth"],
        summary="Current profile",
        operation_id="get_profile",
        response_model=SuccessResponse[ProfileResponse],
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Sessions & devices
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/auth/sessions",
        handler=list_sessions,
        resource="sessions",
        tags=["Sessions"],
        summary="List sessions",
        operation_id="list_sessions",
        response_model=SuccessResponse[list[SessionResponse]],
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/auth/sessions/{refresh_token}",
        handler=logout,
        resource="sessions",
        tags=["Sessions"],
        summary="Logout",
        description="Deactivate the session holding this refresh token.",
        operation_id="logout",
        response_model=SuccessResponse[CountResponse],
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/auth/sessions",
        handler=logout_all_devices,
        resource="sessions",
        tags=["Sessions"],
        summary="Logout from all devices",
        operation_id="logout_all_devices",
        response_model=SuccessResponse[CountResponse],
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/auth/devices",
        handler=list_devices,
        resource="devices",
        tags=["Devices"],
        summary="List devices",
        operation_id="list_devices",
        response_model=SuccessResponse[list[DeviceResponse]],
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/auth/devices/{device_id}",
        handler=revoke_device,
        resource="devices",
        tags=["Devices"],
        summary="Revoke device",
        description="Sign out every session of the device and deactivate it.",
        operation_id="revoke_device",
        response_model=SuccessResponse[CountResponse],
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=404, description="Device not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Two-factor enrollment
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/2fa/setup",
        handler=setup_two_factor,
        resource="two_factor",
        tags=["Two-Factor"],
        summary="Begin two-factor enrollment",
        description="Generate a pending secret and its QR code.",
        operation_id="setup_two_factor",
        response_model=SuccessResponse[TwoFactorSetupResponse],
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=409, description="Two-factor already enabled"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/2fa/verify",
        handler=verify_two_factor,
        resource="two_factor",
        tags=["Two-Factor"],
        summary="Confirm two-factor enrollment",
        operation_id="verify_two_factor",
        response_model=MessageOnly,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=400, description="Enrollment not started"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/auth/2fa/disable",
        handler=disable_two_factor,
        resource="two_factor",
        tags=["Two-Factor"],
        summary="Disable two-factor authentication",
        description="Requires the current password and a valid code.",
        operation_id="disable_two_factor",
        response_model=MessageOnly,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=400, description="Two-factor not enabled"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/auth/2fa/status",
        handler=two_factor_status,
        resource="two_factor",
        tags=["Two-Factor"],
        summary="Two-factor status",
        operation_id="two_factor_status",
        response_model=SuccessResponse[TwoFactorStatusResponse],
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Google login (browser redirects)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/auth/google",
        handler=google_login,
        resource="google",
        tags=["Google"],
        summary="Start Google login",
        operation_id="google_login",
        response_model=None,
        status_code=302,
        errors=[ErrorSpec(status=500, description="Google login not configured")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/auth/google/callback",
        handler=google_callback,
        resource="google",
        tags=["Google"],
        summary="Google login callback",
        description="Redirects to the frontend success or error page.",
        operation_id="google_callback",
        response_model=None,
        status_code=302,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    # =========================================================================
    # Administration
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/admin/accounts/{account_id}/status",
        handler=update_account_status,
        resource="admin",
        tags=["Admin"],
        summary="Update account status",
        description="Blocking an account signs out every session it holds.",
        operation_id="update_account_status",
        response_model=SuccessResponse[CountResponse],
        errors=[
            _UNAUTHORIZED,
            _FORBIDDEN,
            ErrorSpec(status=404, description="Account not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHORIZED,
            permissions=("users.update",),
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/admin/verification-codes/expired",
        handler=purge_expired_codes,
        resource="admin",
        tags=["Admin"],
        summary="Purge expired verification codes",
        operation_id="purge_expired_codes",
        response_model=SuccessResponse[CountResponse],
        errors=[_UNAUTHORIZED, _FORBIDDEN],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHORIZED,
            permissions=("verification_codes.purge", "users.delete"),
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/admin/verification-codes/statistics",
        handler=verification_code_statistics,
        resource="admin",
        tags=["Admin"],
        summary="Verification code statistics",
        operation_id="verification_code_statistics",
        response_model=SuccessResponse[VerificationCodeStatisticsResponse],
        errors=[_UNAUTHORIZED, _FORBIDDEN],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHORIZED,
            permissions=("verification_codes.read",),
        ),
    ),
]
