"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_login_handler, ...

The container is organized into modules:
- infrastructure: Core services (db, clock, security, email, logging)
- repositories: Repository factories (request-scoped)
- auth_handlers: Handler and shared service factories (request-scoped)
- authorization: Casbin permission resolver (initialized at startup)
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_clock,
    get_database,
    get_db_session,
    get_device_parser,
    get_email_service,
    get_google_oauth_client,
    get_logger,
    get_password_service,
    get_token_service,
    get_totp_service,
)

# Repositories
from src.core.container.repositories import (
    get_account_repository,
    get_device_repository,
    get_role_repository,
    get_session_repository,
    get_verification_code_repository,
)

# Handlers and shared services
from src.core.container.auth_handlers import (
    get_device_registry,
    get_disable_two_factor_handler,
    get_forgot_password_handler,
    get_google_login_handler,
    get_list_devices_handler,
    get_list_sessions_handler,
    get_login_handler,
    get_login_with_two_factor_handler,
    get_logout_all_devices_handler,
    get_logout_handler,
    get_profile_handler,
    get_purge_expired_codes_handler,
    get_refresh_token_handler,
    get_register_handler,
    get_resend_verification_handler,
    get_reset_password_handler,
    get_revoke_device_handler,
    get_session_issuer,
    get_setup_two_factor_handler,
    get_two_factor_status_handler,
    get_update_account_status_handler,
    get_verification_code_statistics_handler,
    get_verify_email_handler,
    get_verify_two_factor_handler,
)

# Authorization (Casbin)
from src.core.container.authorization import (
    get_permission_resolver,
    init_permission_resolver,
)

__all__ = [
    # Infrastructure
    "get_clock",
    "get_database",
    "get_db_session",
    "get_device_parser",
    "get_email_service",
    "get_google_oauth_client",
    "get_logger",
    "get_password_service",
    "get_token_service",
    "get_totp_service",
    # Repositories
    "get_account_repository",
    "get_device_repository",
    "get_role_repository",
    "get_session_repository",
    "get_verification_code_repository",
    # Shared services
    "get_device_registry",
    "get_session_issuer",
    # Handlers
    "get_disable_two_factor_handler",
    "get_forgot_password_handler",
    "get_google_login_handler",
    "get_list_devices_handler",
    "get_list_sessions_handler",
    "get_login_handler",
    "get_login_with_two_factor_handler",
    "get_logout_all_devices_handler",
    "get_logout_handler",
    "get_profile_handler",
    "get_purge_expired_codes_handler",
    "get_refresh_token_handler",
    "get_register_handler",
    "get_resend_verification_handler",
    "get_reset_password_handler",
    "get_revoke_device_handler",
    "get_setup_two_factor_handler",
    "get_two_factor_status_handler",
    "get_update_account_status_handler",
    "get_verification_code_statistics_handler",
    "get_verify_email_handler",
    "get_verify_two_factor_handler",
    # Authorization
    "get_permission_resolver",
    "init_permission_resolver",
]
