"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.account import Account
from src.domain.entities.device import Device, derive_fingerprint
from src.domain.entities.role import Permission, Role
from src.domain.entities.session import Session
from src.domain.entities.verification_code import VerificationCode

__all__ = [
    "Account",
    "Device",
    "Permission",
    "Role",
    "Session",
    "VerificationCode",
    "derive_fingerprint",
]
