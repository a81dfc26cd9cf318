"""Principal value object.

The authenticated identity attached to a request by the authentication gate,
before any permission check runs.
"""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class Principal:
    """Authenticated identity.

    Attributes:
        id: Account id (token ``sub`` claim).
        email: Account address.
        role: Role name.
        permission_names: Names granted by the role at request time.
        device_id: Device bound to the access token, if any.
    """

    id: UUID
    email: str
    role: str
    permission_names: frozenset[str] = field(default_factory=frozenset)
    device_id: UUID | None = None
