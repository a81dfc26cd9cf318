"""Repository implementations (adapters).

Each repository implements the matching protocol in
src/domain/protocols/ through structural typing.
"""

from src.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from src.infrastructure.persistence.repositories.device_repository import (
    DeviceRepository,
)
from src.infrastructure.persistence.repositories.role_repository import RoleRepository
from src.infrastructure.persistence.repositories.session_repository import (
    SessionRepository,
)
from src.infrastructure.persistence.repositories.verification_code_repository import (
    VerificationCodeRepository,
)

__all__ = [
    "AccountRepository",
    "DeviceRepository",
    "RoleRepository",
    "SessionRepository",
    "VerificationCodeRepository",
]
