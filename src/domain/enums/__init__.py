"""Domain enums for business logic.

Available Enums:
    - AccountStatus: Account lifecycle status (ACTIVE, BLOCKED)
    - VerificationPurpose: One-time code use cases (REGISTER, RESET_PASSWORD)
    - TokenType: Signed token classes (access, refresh, pending_2fa)
"""

from src.domain.enums.account_status import AccountStatus
from src.domain.enums.token_type import TokenType
from src.domain.enums.verification_purpose import VerificationPurpose

__all__ = [
    "AccountStatus",
    "TokenType",
    "VerificationPurpose",
]
