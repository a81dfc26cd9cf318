"""Authentication handler dependency factories.

Request-scoped handler instances for:
- Registration, email verification, password reset
- Login (password, 2FA, Google), token refresh
- Logout, device revocation, session/device listing
- Two-factor enrollment
- Administrative account and code operations

Handlers get request-scoped repositories (one shared session per request)
and app-scoped services.
"""

from fastapi import Depends

from src.application.commands.handlers.admin_handlers import (
    PurgeExpiredCodesHandler,
    UpdateAccountStatusHandler,
)
from src.application.commands.handlers.forgot_password_handler import (
    ForgotPasswordHandler,
)
from src.application.commands.handlers.google_login_handler import (
    GoogleLoginHandler,
)
from src.application.commands.handlers.login_handler import LoginHandler
from src.application.commands.handlers.login_with_two_factor_handler import (
    LoginWithTwoFactorHandler,
)
from src.application.commands.handlers.logout_handler import (
    LogoutAllDevicesHandler,
    LogoutHandler,
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
from src.application.commands.handlers.revoke_device_handler import (
    RevokeDeviceHandler,
)
from src.application.commands.handlers.two_factor_handlers import (
    DisableTwoFactorHandler,
    SetupTwoFactorHandler,
    VerifyTwoFactorHandler,
)
from src.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)
from src.application.queries.handlers.auth_query_handlers import (
    GetProfileHandler,
    GetTwoFactorStatusHandler,
    GetVerificationCodeStatisticsHandler,
    ListDevicesHandler,
    ListSessionsHandler,
)
from src.application.services import DeviceRegistry, SessionIssuer
from src.core.clock import Clock
from src.core.config import settings
from src.core.container.infrastructure import (
    get_clock,
    get_device_parser,
    get_email_service,
    get_logger,
    get_password_service,
    get_token_service,
    get_totp_service,
)
from src.core.container.repositories import (
    get_account_repository,
    get_device_repository,
    get_role_repository,
    get_session_repository,
    get_verification_code_repository,
)
from src.domain.protocols import (
    AccountRepository,
    DeviceParserProtocol,
    DeviceRepository,
    EmailProtocol,
    PasswordHashingProtocol,
    RoleRepository,
    SessionRepository,
    TokenServiceProtocol,
    TotpProtocol,
    VerificationCodeRepository,
)


# ============================================================================
# Shared Application Services (Request-Scoped)
# ============================================================================


async def get_device_registry(
    device_repo: DeviceRepository = Depends(get_device_repository),
    device_parser: DeviceParserProtocol = Depends(get_device_parser),
    clock: Clock = Depends(get_clock),
) -> DeviceRegistry:
    return DeviceRegistry(
        device_repo=device_repo,
        device_parser=device_parser,
        clock=clock,
        logger=get_logger(),
    )


async def get_session_issuer(
    device_registry: DeviceRegistry = Depends(get_device_registry),
    session_repo: SessionRepository = Depends(get_session_repository),
    token_service: TokenServiceProtocol = Depends(get_token_service),
    clock: Clock = Depends(get_clock),
) -> SessionIssuer:
    """Get the shared "device, tokens, session" step of every login flow."""
    return SessionIssuer(
        device_registry=device_registry,
        session_repo=session_repo,
        token_service=token_service,
        clock=clock,
        logger=get_logger(),
    )


# ============================================================================
# Registration and Verification Handler Factories
# ============================================================================


async def get_register_handler(
    account_repo: AccountRepository = Depends(get_account_repository),
    role_repo: RoleRepository = Depends(get_role_repository),
    code_repo: VerificationCodeRepository = Depends(
        get_verification_code_repository
    ),
    password_service: PasswordHashingProtocol = Depends(get_password_service),
    email_service: EmailProtocol = Depends(get_email_service),
    clock: Clock = Depends(get_clock),
) -> RegisterHandler:
    """Get RegisterHandler instance (request-scoped).

    Returns:
        RegisterHandler with the default role and code lifetime from settings.
    """
    return RegisterHandler(
        account_repo=account_repo,
        role_repo=role_repo,
        code_repo=code_repo,
        password_service=password_service,
        email_service=email_service,
        clock=clock,
        logger=get_logger(),
        default_role=settings.default_role,
        code_ttl_seconds=settings.otp_expires_seconds,
    )


async def get_verify_email_handler(
    account_repo: AccountRepository = Depends(get_account_repository),
    code_repo: VerificationCodeRepository = Depends(
        get_verification_code_repository
    ),
    clock: Clock = Depends(get_clock),
) -> VerifyEmailHandler:
    return VerifyEmailHandler(
        account_repo=account_repo,
        code_repo=code_repo,
        clock=clock,
        logger=get_logger(),
    )


async def get_resend_verification_handler(
    account_repo: AccountRepository = Depends(get_account_repository),
    code_repo: VerificationCodeRepository = Depends(
        get_verification_code_repository
    ),
    email_service: EmailProtocol = Depends(get_email_service),
) -> ResendVerificationHandler:
    return ResendVerificationHandler(
        account_repo=account_repo,
        code_repo=code_repo,
        email_service=email_service,
        logger=get_logger(),
        code_ttl_seconds=settings.otp_expires_seconds,
        throttle_seconds=settings.otp_resend_throttle_seconds,
    )


async def get_forgot_password_handler(
    account_repo: AccountRepository = Depends(get_account_repository),
    code_repo: VerificationCodeRepository = Depends(
        get_verification_code_repository
    ),
    email_service: EmailProtocol = Depends(get_email_service),
) -> ForgotPasswordHandler:
    return ForgotPasswordHandler(
        account_repo=account_repo,
        code_repo=code_repo,
        email_service=email_service,
        logger=get_logger(),
        code_ttl_seconds=settings.otp_expires_seconds,
        throttle_seconds=settings.otp_resend_throttle_seconds,
    )


async def get_reset_password_handler(
    account_repo: AccountRepository = Depends(get_account_repository),
    code_repo: VerificationCodeRepository = Depends(
        get_verification_code_repository
    ),
    session_repo: SessionRepository = Depends(get_session_repository),
    password_service: PasswordHashingProtocol = Depends(get_password_service),
    email_service: EmailProtocol = Depends(get_email_service),
) -> ResetPasswordHandler:
    return ResetPasswordHandler(
        account_repo=account_repo,
        code_repo=code_repo,
        session_repo=session_repo,
        password_service=password_service,
        email_service=email_service,
        logger=get_logger(),
    )


# ============================================================================
# Login and Token Handler Factories
# ============================================================================


async def get_login_handler(
    account_repo: AccountRepository = Depends(get_account_repository),
    password_service: PasswordHashingProtocol = Depends(get_password_service),
    token_service: TokenServiceProtocol = Depends(get_token_service),
    session_issuer: SessionIssuer = Depends(get_session_issuer),
) -> LoginHandler:
    return LoginHandler(
        account_repo=account_repo,
        password_service=password_service,
        token_service=token_service,
        session_issuer=session_issuer,
        logger=get_logger(),
    )


async def get_login_with_two_factor_handler(
    account_repo: AccountRepository = Depends(get_account_repository),
    token_service: TokenServiceProtocol = Depends(get_token_service),
    totp_service: TotpProtocol = Depends(get_totp_service),
    session_issuer: SessionIssuer = Depends(get_session_issuer),
) -> LoginWithTwoFactorHandler:
    return LoginWithTwoFactorHandler(
        account_repo=account_repo,
        token_service=token_service,
        totp_service=totp_service,
        session_issuer=session_issuer,
        logger=get_logger(),
    )


async def get_google_login_handler(
    account_repo: AccountRepository = Depends(get_account_repository),
    role_repo: RoleRepository = Depends(get_role_repository),
    session_issuer: SessionIssuer = Depends(get_session_issuer),
    clock: Clock = Depends(get_clock),
) -> GoogleLoginHandler:
    return GoogleLoginHandler(
        account_repo=account_repo,
        role_repo=role_repo,
        session_issuer=session_issuer,
        clock=clock,
        logger=get_logger(),
        default_role=settings.default_role,
    )


async def get_refresh_token_handler(
    session_repo: SessionRepository = Depends(get_session_repository),
    device_registry: DeviceRegistry = Depends(get_device_registry),
    token_service: TokenServiceProtocol = Depends(get_token_service),
    clock: Clock = Depends(get_clock),
) -> RefreshAccessTokenHandler:
    return RefreshAccessTokenHandler(
        session_repo=session_repo,
        device_registry=device_registry,
        token_service=token_service,
        clock=clock,
        logger=get_logger(),
    )


# ============================================================================
# Session and Device Handler Factories
# ============================================================================


async def get_logout_handler(
    session_repo: SessionRepository = Depends(get_session_repository),
) -> LogoutHandler:
    return LogoutHandler(session_repo=session_repo, logger=get_logger())


async def get_logout_all_devices_handler(
    session_repo: SessionRepository = Depends(get_session_repository),
) -> LogoutAllDevicesHandler:
    return LogoutAllDevicesHandler(session_repo=session_repo, logger=get_logger())


async def get_revoke_device_handler(
    device_repo: DeviceRepository = Depends(get_device_repository),
    session_repo: SessionRepository = Depends(get_session_repository),
    device_registry: DeviceRegistry = Depends(get_device_registry),
) -> RevokeDeviceHandler:
    return RevokeDeviceHandler(
        device_repo=device_repo,
        session_repo=session_repo,
        device_registry=device_registry,
        logger=get_logger(),
    )


async def get_list_sessions_handler(
    session_repo: SessionRepository = Depends(get_session_repository),
    clock: Clock = Depends(get_clock),
) -> ListSessionsHandler:
    return ListSessionsHandler(session_repo=session_repo, clock=clock)


async def get_list_devices_handler(
    device_registry: DeviceRegistry = Depends(get_device_registry),
) -> ListDevicesHandler:
    return ListDevicesHandler(device_registry=device_registry)


async def get_profile_handler(
    account_repo: AccountRepository = Depends(get_account_repository),
) -> GetProfileHandler:
    return GetProfileHandler(account_repo=account_repo)


# ============================================================================
# Two-Factor Handler Factories
# ============================================================================


async def get_setup_two_factor_handler(
    account_repo: AccountRepository = Depends(get_account_repository),
    totp_service: TotpProtocol = Depends(get_totp_service),
) -> SetupTwoFactorHandler:
    return SetupTwoFactorHandler(
        account_repo=account_repo, totp_service=totp_service, logger=get_logger()
    )


async def get_verify_two_factor_handler(
    account_repo: AccountRepository = Depends(get_account_repository),
    totp_service: TotpProtocol = Depends(get_totp_service),
) -> VerifyTwoFactorHandler:
    return VerifyTwoFactorHandler(
        account_repo=account_repo, totp_service=totp_service, logger=get_logger()
    )


async def get_disable_two_factor_handler(
    account_repo: AccountRepository = Depends(get_account_repository),
    password_service: PasswordHashingProtocol = Depends(get_password_service),
    totp_service: TotpProtocol = Depends(get_totp_service),
) -> DisableTwoFactorHandler:
    return DisableTwoFactorHandler(
        account_repo=account_repo,
        password_service=password_service,
        totp_service=totp_service,
        logger=get_logger(),
    )


async def get_two_factor_status_handler(
    account_repo: AccountRepository = Depends(get_account_repository),
) -> GetTwoFactorStatusHandler:
    return GetTwoFactorStatusHandler(account_repo=account_repo)


# ============================================================================
# Administrative Handler Factories
# ============================================================================


async def get_update_account_status_handler(
    account_repo: AccountRepository = Depends(get_account_repository),
    session_repo: SessionRepository = Depends(get_session_repository),
) -> UpdateAccountStatusHandler:
    return UpdateAccountStatusHandler(
        account_repo=account_repo, session_repo=session_repo, logger=get_logger()
    )


async def get_purge_expired_codes_handler(
    code_repo: VerificationCodeRepository = Depends(
        get_verification_code_repository
    ),
) -> PurgeExpiredCodesHandler:
    return PurgeExpiredCodesHandler(code_repo=code_repo, logger=get_logger())


async def get_verification_code_statistics_handler(
    code_repo: VerificationCodeRepository = Depends(
        get_verification_code_repository
    ),
) -> GetVerificationCodeStatisticsHandler:
    return GetVerificationCodeStatisticsHandler(code_repo=code_repo)
