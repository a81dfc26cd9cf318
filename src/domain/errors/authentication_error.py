"""Authentication domain errors.

Error value constants returned inside Failure(...) by token and two-factor
adapters. These are NOT exceptions.

Usage:
    from src.domain.errors import AuthenticationError

    match token_service.verify(token, TokenType.ACCESS):
        case Success(value=claims):
            ...
        case Failure(error=AuthenticationError.EXPIRED_TOKEN):
            ...
"""


class AuthenticationError:
    """Authentication error constants.

    Error Categories:
        - Token errors: INVALID_TOKEN, EXPIRED_TOKEN, WRONG_TOKEN_TYPE
        - Two-factor errors: INVALID_TWO_FACTOR_CODE
    """

    # Token validation errors
    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token expired"
    WRONG_TOKEN_TYPE = "Wrong token type"

    # Two-factor errors
    INVALID_TWO_FACTOR_CODE = "Invalid two-factor code"
