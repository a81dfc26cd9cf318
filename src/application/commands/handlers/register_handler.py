"""Registration handler.

Flow:
1. Reject if the address already has an account
2. Hash password (off the event loop)
3. Create the account (unverified, ACTIVE, default role)
4. Invalidate stale registration codes, issue a new one
5. Send the code

The account row is committed before the code is issued because
verification looks the account up. The unique constraint on the address
is the real guard against concurrent registrations; the lookup in step 1
only produces the friendlier error early.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- Repositories and services are injected via protocols
"""

import asyncio

from uuid_extensions import uuid7

from src.application.commands.auth_commands import Register
from src.application.dtos import AccountSummary, RegistrationResult
from src.application.errors import ApplicationError, AuthFailures
from src.core.clock import Clock
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.enums import AccountStatus, VerificationPurpose
from src.domain.protocols import (
    AccountRepository,
    EmailProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    RoleRepository,
    VerificationCodeRepository,
)

REGISTRATION_MESSAGE = (
    "Registration successful. Check your email for the verification code"
)


class RegisterHandler:
    """Handler for Register command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        role_repo: RoleRepository,
        code_repo: VerificationCodeRepository,
        password_service: PasswordHashingProtocol,
        email_service: EmailProtocol,
        clock: Clock,
        logger: LoggerProtocol,
        default_role: str = "user",
        code_ttl_seconds: int = 300,
    ) -> None:
        self._account_repo = account_repo
        self._role_repo = role_repo
        self._code_repo = code_repo
        self._password_service = password_service
        self._email_service = email_service
        self._clock = clock
        self._logger = logger
        self._default_role = default_role
        self._code_ttl_seconds = code_ttl_seconds

    async def handle(
        self, cmd: Register
    ) -> Result[RegistrationResult, ApplicationError]:
        """Handle Register command.

        Args:
            cmd: Register command (fields validated by Annotated types).

        Returns:
            Success(RegistrationResult) with the new account summary.
            Failure(EMAIL_ALREADY_EXISTS) if the address is taken.
        """
        if await self._account_repo.find_by_email(cmd.email) is not None:
            self._logger.info("registration_rejected", reason="email_exists")
            return Failure(error=AuthFailures.EMAIL_ALREADY_EXISTS)

        role = await self._role_repo.find_by_name(self._default_role)
        if role is None:
            self._logger.error("default_role_missing", role=self._default_role)
            return Failure(error=AuthFailures.DEFAULT_ROLE_MISSING)

        password_hash = await asyncio.to_thread(
            self._password_service.hash_password, cmd.password
        )
        now = self._clock.now()
        account = Account(
            id=uuid7(),
            email=cmd.email,
            name=cmd.name,
            role_id=role.id,
            role_name=role.name,
            password_hash=password_hash,
            phone_number=cmd.phone_number,
            status=AccountStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        )

        if not await self._account_repo.create(account):
            # Lost a race against a concurrent registration
            self._logger.info("registration_rejected", reason="email_exists")
            return Failure(error=AuthFailures.EMAIL_ALREADY_EXISTS)

        await self._code_repo.invalidate(cmd.email, VerificationPurpose.REGISTER)
        code = await self._code_repo.issue(cmd.email, VerificationPurpose.REGISTER)
        await self._email_service.send_verification_code(
            cmd.email, code, VerificationPurpose.REGISTER, self._code_ttl_seconds
        )

        self._logger.info("account_registered", account_id=str(account.id))
        return Success(
            value=RegistrationResult(
                account=AccountSummary.from_account(account),
                message=REGISTRATION_MESSAGE,
            )
        )
