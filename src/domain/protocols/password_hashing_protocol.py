"""Password hashing protocol for domain layer.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and comparison interface.

    Usage:
        def __init__(self, password_service: PasswordHashingProtocol):
            self._password_service = password_service

        digest = self._password_service.hash_password("SecurePass123")
        ok = self._password_service.verify_password("SecurePass123", digest)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password with the configured work factor.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Compare a plaintext password against a hash in constant time.

        Args:
            password: Plaintext password to verify.
            password_hash: Stored hash.

        Returns:
            True if password matches hash, False otherwise (including
            malformed hashes).
        """
        ...
