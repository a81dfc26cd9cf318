"""TOTP two-factor enrollment handlers.

Enrollment states:
    not enrolled -> (Setup) pending secret -> (Verify) enrolled -> (Disable) not enrolled

Setup may be repeated while pending; each call replaces the pending secret.
"""

import asyncio

from src.application.commands.two_factor_commands import (
    DisableTwoFactor,
    SetupTwoFactor,
    VerifyTwoFactor,
)
from src.application.dtos import MessageResult
from src.application.errors import ApplicationError, AuthFailures
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
    TotpEnrollment,
    TotpProtocol,
)


class SetupTwoFactorHandler:
    """Generate a secret and store it as pending."""

    def __init__(
        self,
        account_repo: AccountRepository,
        totp_service: TotpProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._totp_service = totp_service
        self._logger = logger

    async def handle(
        self, cmd: SetupTwoFactor
    ) -> Result[TotpEnrollment, ApplicationError]:
        """Handle SetupTwoFactor command.

        Returns:
            Success(TotpEnrollment) with secret, otpauth URI and QR code.
            Failure(TWO_FACTOR_ALREADY_ENABLED) if already enrolled.
        """
        account = await self._account_repo.find_by_id(cmd.account_id)
        if account is None:
            return Failure(error=AuthFailures.USER_NOT_FOUND)
        if account.two_factor_enabled:
            return Failure(error=AuthFailures.TWO_FACTOR_ALREADY_ENABLED)

        secret = self._totp_service.generate_secret()
        # QR rendering is CPU-bound
        enrollment = await asyncio.to_thread(
            self._totp_service.build_enrollment, account.email, secret
        )

        account.begin_two_factor_enrollment(secret)
        await self._account_repo.update(account)

        self._logger.info("two_factor_setup_started", account_id=str(account.id))
        return Success(value=enrollment)


class VerifyTwoFactorHandler:
    """Confirm the pending secret and enable 2FA."""

    def __init__(
        self,
        account_repo: AccountRepository,
        totp_service: TotpProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._totp_service = totp_service
        self._logger = logger

    async def handle(
        self, cmd: VerifyTwoFactor
    ) -> Result[MessageResult, ApplicationError]:
        account = await self._account_repo.find_by_id(cmd.account_id)
        if account is None:
            return Failure(error=AuthFailures.USER_NOT_FOUND)
        if account.two_factor_enabled:
            return Failure(error=AuthFailures.TWO_FACTOR_ALREADY_ENABLED)
        if not account.has_pending_two_factor or account.totp_secret is None:
            return Failure(error=AuthFailures.TWO_FACTOR_NOT_INITIATED)

        if not self._totp_service.verify_code(account.totp_secret, cmd.code):
            self._logger.info(
                "two_factor_verify_failed", account_id=str(account.id)
            )
            return Failure(error=AuthFailures.INVALID_TWO_FACTOR_CODE)

        account.confirm_two_factor()
        await self._account_repo.update(account)

        self._logger.info("two_factor_enabled", account_id=str(account.id))
        return Success(
            value=MessageResult(message="Two-factor authentication enabled")
        )


class DisableTwoFactorHandler:
    """Disable 2FA after password re-confirmation and a current TOTP code."""

    def __init__(
        self,
        account_repo: AccountRepository,
        password_service: PasswordHashingProtocol,
        totp_service: TotpProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._password_service = password_service
        self._totp_service = totp_service
        self._logger = logger

    async def handle(
        self, cmd: DisableTwoFactor
    ) -> Result[MessageResult, ApplicationError]:
        """Handle DisableTwoFactor command.

        Both checks always run so the response does not reveal which one
        failed first.

        Returns:
            Success(MessageResult).
            Failure(TWO_FACTOR_NOT_ENABLED), Failure(INVALID_CREDENTIALS) or
            Failure(INVALID_TWO_FACTOR_CODE).
        """
        account = await self._account_repo.find_by_id(cmd.account_id)
        if account is None:
            return Failure(error=AuthFailures.USER_NOT_FOUND)
        if not account.two_factor_enabled or account.totp_secret is None:
            return Failure(error=AuthFailures.TWO_FACTOR_NOT_ENABLED)

        password_ok = account.password_hash is not None and await asyncio.to_thread(
            self._password_service.verify_password, cmd.password, account.password_hash
        )
        code_ok = self._totp_service.verify_code(account.totp_secret, cmd.code)

        if not password_ok:
            self._logger.info(
                "two_factor_disable_failed",
                reason="wrong_password",
                account_id=str(account.id),
            )
            return Failure(error=AuthFailures.INVALID_CREDENTIALS)
        if not code_ok:
            self._logger.info(
                "two_factor_disable_failed",
                reason="invalid_code",
                account_id=str(account.id),
            )
            return Failure(error=AuthFailures.INVALID_TWO_FACTOR_CODE)

        account.disable_two_factor()
        await self._account_repo.update(account)

        self._logger.info("two_factor_disabled", account_id=str(account.id))
        return Success(
            value=MessageResult(message="Two-factor authentication disabled")
        )
