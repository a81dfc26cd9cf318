"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, TokenServiceProtocol
    from src.domain.protocols import AccountRepository, SessionRepository
"""

# Service protocols
from src.domain.protocols.device_parser_protocol import (
    DeviceDetails,
    DeviceParserProtocol,
)
from src.domain.protocols.email_protocol import EmailProtocol
from src.domain.protocols.google_oauth_protocol import (
    GoogleOAuthProtocol,
    GoogleProfile,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.permission_resolver_protocol import (
    PermissionResolverProtocol,
)
from src.domain.protocols.token_service_protocol import (
    TokenClaims,
    TokenServiceProtocol,
)
from src.domain.protocols.totp_protocol import TotpEnrollment, TotpProtocol

# Repository protocols
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.device_repository import DeviceRepository
from src.domain.protocols.role_repository import RoleRepository
from src.domain.protocols.session_repository import SessionRepository
from src.domain.protocols.verification_code_repository import (
    VerificationCodeRepository,
    VerificationCodeStatistics,
)

__all__ = [
    # Service protocols
    "DeviceDetails",
    "DeviceParserProtocol",
    "EmailProtocol",
    "GoogleOAuthProtocol",
    "GoogleProfile",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "PermissionResolverProtocol",
    "TokenClaims",
    "TokenServiceProtocol",
    "TotpEnrollment",
    "TotpProtocol",
    # Repository protocols
    "AccountRepository",
    "DeviceRepository",
    "RoleRepository",
    "SessionRepository",
    "VerificationCodeRepository",
    "VerificationCodeStatistics",
]
