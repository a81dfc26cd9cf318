"""Application commands (CQRS write side).

Each command has exactly one handler in ``commands/handlers``.
"""

from src.application.commands.admin_commands import (
    PurgeExpiredCodes,
    UpdateAccountStatus,
)
from src.application.commands.auth_commands import (
    ForgotPassword,
    GoogleLogin,
    Login,
    LoginWithTwoFactor,
    RefreshAccessToken,
    Register,
    ResendVerification,
    ResetPassword,
    VerifyEmail,
)
from src.application.commands.session_commands import (
    Logout,
    LogoutAllDevices,
    RevokeDevice,
)
from src.application.commands.two_factor_commands import (
    DisableTwoFactor,
    SetupTwoFactor,
    VerifyTwoFactor,
)

__all__ = [
    "DisableTwoFactor",
    "ForgotPassword",
    "GoogleLogin",
    "Login",
    "LoginWithTwoFactor",
    "Logout",
    "LogoutAllDevices",
    "PurgeExpiredCodes",
    "RefreshAccessToken",
    "Register",
    "ResendVerification",
    "ResetPassword",
    "RevokeDevice",
    "SetupTwoFactor",
    "UpdateAccountStatus",
    "VerifyEmail",
    "VerifyTwoFactor",
]
