"""Pytest configuration shared by unit, integration and API tests.

This configuration ensures:
1. Required settings exist before any ``src`` module is imported
2. Every integration test gets a fresh in-memory SQLite database
3. Time-dependent code runs against a controllable clock
"""

import os

# Settings are loaded at import time; defaults must be in place first.
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-access-secret-0123456789abcdefghij")
os.environ.setdefault("JWT_REFRESH_SECRET", "test-refresh-secret-0123456789abcdefghij")
os.environ.setdefault("BCRYPT_ROUNDS", "10")

from datetime import UTC, datetime, timedelta  # noqa: E402
from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with a real (SQLite) database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")


class FrozenClock:
    """Clock whose time only moves when a test says so."""

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or datetime(2026, 3, 1, 12, 0, 0, tzinfo=UTC)

    def now(self) -> datetime:
        return self._now

    def advance(self, **kwargs: float) -> None:
        """Move time forward, e.g. ``clock.advance(seconds=61)``."""
        self._now = self._now + timedelta(**kwargs)


@pytest.fixture
def frozen_clock():
    """Provide a FrozenClock starting at 2026-03-01 12:00 UTC."""
    return FrozenClock()


@pytest_asyncio.fixture
async def test_database():
    """Provide a Database backed by a fresh in-memory SQLite database.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                repo = AccountRepository(session=session)
    """
    from src.infrastructure.persistence.database import Database

    db = Database(database_url="sqlite+aiosqlite:///:memory:")
    await db.create_all()
    yield db
    await db.close()


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    Usage:
        def test_something(mock_logger):
            handler = LogoutHandler(session_repo=repo, logger=mock_logger)
            ...
            mock_logger.info.assert_called_once()
    """
    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.error = Mock()
    logger.warning = Mock()
    return logger
