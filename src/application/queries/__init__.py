"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetProfile, ListDevices).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.auth_queries import (
    GetProfile,
    GetTwoFactorStatus,
    GetVerificationCodeStatistics,
    ListDevices,
    ListSessions,
)

__all__ = [
    # Account queries
    "GetProfile",
    "GetTwoFactorStatus",
    # Session and device queries
    "ListSessions",
    "ListDevices",
    # Administrative queries
    "GetVerificationCodeStatistics",
]
