"""Account lifecycle status.

Blocked accounts cannot log in, refresh through a new login, reset their
password, or complete federated login. Status changes are administrative.
"""

from enum import Enum


class AccountStatus(str, Enum):
    """Account lifecycle status.

    String Enum:
        Inherits from str so values serialize directly into API payloads
        and database columns.
    """

    ACTIVE = "ACTIVE"
    BLOCKED = "BLOCKED"
