"""Two-factor login handler (second step of Login).

Flow:
1. Verify the pending-2FA token (signature, expiry, class)
2. Look up the account by the token's address; 2FA must be enrolled
3. Reject blocked accounts
4. Verify the TOTP code against the stored secret
5. Issue a device-bound session (same tail as Login)
"""

from src.application.commands.auth_commands import LoginWithTwoFactor
from src.application.dtos import AccountSummary, LoginResult
from src.application.errors import ApplicationError, AuthFailures
from src.application.services.session_issuer import SessionIssuer
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    TokenServiceProtocol,
    TotpProtocol,
)


class LoginWithTwoFactorHandler:
    """Handler for LoginWithTwoFactor command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        token_service: TokenServiceProtocol,
        totp_service: TotpProtocol,
        session_issuer: SessionIssuer,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._token_service = token_service
        self._totp_service = totp_service
        self._session_issuer = session_issuer
        self._logger = logger

    async def handle(
        self, cmd: LoginWithTwoFactor
    ) -> Result[LoginResult, ApplicationError]:
        match self._token_service.verify_pending_two_factor(cmd.temp_token):
            case Failure(error=reason):
                self._logger.info("two_factor_login_failed", reason=reason)
                return Failure(error=AuthFailures.INVALID_TOKEN)
            case Success(value=email):
                pass

        account = await self._account_repo.find_by_email(email)
        if account is None or not account.two_factor_enabled or not account.totp_secret:
            return Failure(error=AuthFailures.LOGIN_TWO_FACTOR_NOT_ENABLED)

        if account.is_blocked:
            return Failure(error=AuthFailures.ACCOUNT_BLOCKED)

        if not self._totp_service.verify_code(account.totp_secret, cmd.code):
            self._logger.info(
                "two_factor_login_failed",
                reason="invalid_code",
                account_id=str(account.id),
            )
            return Failure(error=AuthFailures.INVALID_TWO_FACTOR_CODE)

        issued = await self._session_issuer.issue(
            account, cmd.ip_address, cmd.user_agent
        )
        self._logger.info(
            "login_succeeded",
            account_id=str(account.id),
            device_id=str(issued.device_id),
            two_factor=True,
        )
        return Success(
            value=LoginResult(
                tokens=issued.tokens,
                account=AccountSummary.from_account(account),
                device_id=issued.device_id,
            )
        )
