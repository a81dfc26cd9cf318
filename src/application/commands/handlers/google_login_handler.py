"""Google login handler (federated identity).

Flow:
1. Find the account by Google subject id
2. Else find it by address and link it (store google_id, mark verified)
3. Else create a verified, password-less account with the default role
4. Reject blocked accounts
5. Issue a device-bound session, exactly like a password login

Password and 2FA checks are skipped: Google has already authenticated the
user. Routing through SessionIssuer means device revocation and logout-all
cover federated sessions too.
"""

from uuid_extensions import uuid7

from src.application.commands.auth_commands import GoogleLogin
from src.application.dtos import AccountSummary, LoginResult
from src.application.errors import ApplicationError, AuthFailures
from src.application.services.session_issuer import SessionIssuer
from src.core.clock import Clock
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.protocols import (
    AccountRepository,
    GoogleProfile,
    LoggerProtocol,
    RoleRepository,
)


class GoogleLoginHandler:
    """Handler for GoogleLogin command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        role_repo: RoleRepository,
        session_issuer: SessionIssuer,
        clock: Clock,
        logger: LoggerProtocol,
        default_role: str = "user",
    ) -> None:
        self._account_repo = account_repo
        self._role_repo = role_repo
        self._session_issuer = session_issuer
        self._clock = clock
        self._logger = logger
        self._default_role = default_role

    async def handle(self, cmd: GoogleLogin) -> Result[LoginResult, ApplicationError]:
        match await self._resolve_account(cmd.profile):
            case Failure() as failure:
                return failure
            case Success(value=account):
                pass

        if account.is_blocked:
            self._logger.warning("google_login_blocked", account_id=str(account.id))
            return Failure(error=AuthFailures.ACCOUNT_BLOCKED)

        issued = await self._session_issuer.issue(
            account, cmd.ip_address, cmd.user_agent
        )
        self._logger.info(
            "login_succeeded",
            account_id=str(account.id),
            device_id=str(issued.device_id),
            provider="google",
        )
        return Success(
            value=LoginResult(
                tokens=issued.tokens,
                account=AccountSummary.from_account(account),
                device_id=issued.device_id,
            )
        )

    async def _resolve_account(
        self, profile: GoogleProfile
    ) -> Result[Account, ApplicationError]:
        """Find, link or create the account for a Google identity."""
        account = await self._account_repo.find_by_google_id(profile.google_id)
        if account is not None:
            return Success(value=account)

        now = self._clock.now()
        account = await self._account_repo.find_by_email(profile.email)
        if account is not None:
            account.google_id = profile.google_id
            account.mark_verified(now)
            if account.avatar is None:
                account.avatar = profile.avatar
            await self._account_repo.update(account)
            self._logger.info("google_account_linked", account_id=str(account.id))
            return Success(value=account)

        role = await self._role_repo.find_by_name(self._default_role)
        if role is None:
            self._logger.error("default_role_missing", role=self._default_role)
            return Failure(error=AuthFailures.DEFAULT_ROLE_MISSING)

        account = Account(
            id=uuid7(),
            email=profile.email,
            name=profile.name,
            role_id=role.id,
            role_name=role.name,
            avatar=profile.avatar,
            google_id=profile.google_id,
            verified_at=now,
            created_at=now,
            updated_at=now,
        )
        if not await self._account_repo.create(account):
            # A concurrent callback for the same identity created it first
            existing = await self._account_repo.find_by_email(profile.email)
            if existing is None:
                return Failure(error=AuthFailures.OAUTH_FAILED)
            return Success(value=existing)

        self._logger.info("google_account_created", account_id=str(account.id))
        return Success(value=account)
