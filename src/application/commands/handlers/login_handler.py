"""Login handler.

Flow (CredentialsChecked -> [2FA-Pending] -> Session-Issued):
1. Find account by address (unknown address reports INVALID_CREDENTIALS)
2. OAuth-only account: point the caller to Google sign-in
3. Compare password
4. Require a verified address
5. Reject blocked accounts
6. 2FA enrolled: return a pending-2FA token, create nothing else
7. Otherwise issue a device-bound session

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- Device, token and session work is delegated to SessionIssuer
"""

import asyncio

from src.application.commands.auth_commands import Login
from src.application.dtos import AccountSummary, LoginResult
from src.application.errors import ApplicationError, AuthFailures
from src.application.services.session_issuer import SessionIssuer
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenServiceProtocol,
)


class LoginHandler:
    """Handler for Login command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenServiceProtocol,
        session_issuer: SessionIssuer,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            account_repo: Account repository.
            password_service: Password comparison.
            token_service: Signs the pending-2FA token.
            session_issuer: Device + tokens + session tail.
            logger: Structured logger.
        """
        self._account_repo = account_repo
        self._password_service = password_service
        self._token_service = token_service
        self._session_issuer = session_issuer
        self._logger = logger

    async def handle(self, cmd: Login) -> Result[LoginResult, ApplicationError]:
        """Handle Login command.

        Args:
            cmd: Login command.

        Returns:
            Success(LoginResult) with tokens, or with ``requires_2fa`` and a
            ``temp_token`` when 2FA is enrolled.
            Failure(ApplicationError) with reason INVALID_CREDENTIALS,
            PASSWORD_NOT_SET, EMAIL_NOT_VERIFIED or ACCOUNT_BLOCKED.
        """
        account = await self._account_repo.find_by_email(cmd.email)
        if account is None:
            self._logger.info("login_failed", reason="unknown_email")
            return Failure(error=AuthFailures.INVALID_CREDENTIALS)

        if account.password_hash is None:
            self._logger.info(
                "login_failed", reason="password_not_set", account_id=str(account.id)
            )
            return Failure(error=AuthFailures.LOGIN_PASSWORD_NOT_SET)

        password_ok = await asyncio.to_thread(
            self._password_service.verify_password, cmd.password, account.password_hash
        )
        if not password_ok:
            self._logger.info(
                "login_failed", reason="wrong_password", account_id=str(account.id)
            )
            return Failure(error=AuthFailures.INVALID_CREDENTIALS)

        if not account.is_verified:
            return Failure(error=AuthFailures.EMAIL_NOT_VERIFIED)

        if account.is_blocked:
            self._logger.warning("login_blocked_account", account_id=str(account.id))
            return Failure(error=AuthFailures.ACCOUNT_BLOCKED)

        if account.two_factor_enabled:
            self._logger.info("login_two_factor_required", account_id=str(account.id))
            return Success(
                value=LoginResult(
                    requires_2fa=True,
                    temp_token=self._token_service.sign_pending_two_factor(
                        account.email
                    ),
                )
            )

        issued = await self._session_issuer.issue(
            account, cmd.ip_address, cmd.user_agent
        )
        self._logger.info(
            "login_succeeded",
            account_id=str(account.id),
            device_id=str(issued.device_id),
        )
        return Success(
            value=LoginResult(
                tokens=issued.tokens,
                account=AccountSummary.from_account(account),
                device_id=issued.device_id,
            )
        )
