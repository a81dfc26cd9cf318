"""Token classes issued by the token service.

Usage:
    result = token_service.verify(token, TokenType.REFRESH)
"""

from enum import Enum


class TokenType(str, Enum):
    """Signed token classes.

    Attributes:
        ACCESS: Short-lived bearer token for authenticated routes.
        REFRESH: Long-lived token bound to a session row.
        PENDING_2FA: 5-minute token proving the password step of a 2FA login.
    """

    ACCESS = "access"
    REFRESH = "refresh"
    PENDING_2FA = "pending_2fa"
