"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol with bcrypt. The cost factor comes from
``BCRYPT_ROUNDS`` (default 12, accepted range 10-15).

Hashing is CPU-bound; async callers run it through ``asyncio.to_thread`` so
a hash never blocks the event loop.
"""

import bcrypt

MIN_COST_FACTOR = 10
MAX_COST_FACTOR = 15


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        digest = password_service.hash_password("SecurePass123")
        password_service.verify_password("SecurePass123", digest)  # True
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Logarithmic work factor; each +1 doubles hash time.

        Raises:
            ValueError: If cost_factor is outside [10, 15].
        """
        if not MIN_COST_FACTOR <= cost_factor <= MAX_COST_FACTOR:
            msg = (
                f"Cost factor must be between {MIN_COST_FACTOR} "
                f"and {MAX_COST_FACTOR}"
            )
            raise ValueError(msg)

        self._cost_factor = cost_factor

    @property
    def cost_factor(self) -> int:
        return self._cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password.

        Returns:
            bcrypt digest (``$2b$<cost>$...``, 60 characters). A fresh salt is
            generated on every call.
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Compare a plaintext password against a bcrypt digest.

        Returns:
            True on match. False on mismatch and on malformed digests.
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            return False
