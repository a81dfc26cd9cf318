"""Database models for persistence layer.

SQLAlchemy models mapping to database tables. These are infrastructure
concerns and are not imported by the domain layer.

Models Organization:
    - role.py: Role, Permission and the role_permissions association
    - account.py: Account
    - verification_code.py: One-time codes
    - device.py: Tracked devices
    - session.py: Refresh-token sessions

Note:
    Domain entities (dataclasses) live in src/domain/entities/ and are
    mapped to these models by the repository layer.
"""

from src.infrastructure.persistence.models.account import Account
from src.infrastructure.persistence.models.device import Device
from src.infrastructure.persistence.models.role import (
    Permission,
    Role,
    role_permissions,
)
from src.infrastructure.persistence.models.session import Session
from src.infrastructure.persistence.models.verification_code import VerificationCode

__all__ = [
    "Account",
    "Device",
    "Permission",
    "Role",
    "Session",
    "VerificationCode",
    "role_permissions",
]
