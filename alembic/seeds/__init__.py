"""Idempotent bootstrap data applied after ``alembic upgrade``."""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from seeds.rbac_seeder import seed_rbac_policies

logger = structlog.get_logger(__name__)


async def run_all_seeders(session: AsyncSession) -> None:
    """Seed roles and permissions. Safe to run on every migration."""
    logger.info("seeding_started")
    await seed_rbac_policies(session)
    logger.info("seeding_completed", seeders=["rbac"])


__all__ = ["run_all_seeders", "seed_rbac_policies"]
