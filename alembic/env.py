"""Alembic environment for the async auth database.

The database URL comes from Settings, never from alembic.ini. After an online
``alembic upgrade`` the RBAC seeder brings roles and permissions up to date.
Pass ``-x seed=false`` to skip it or ``-x seed=true`` to force it.
"""

import asyncio
import os
import sys
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine, async_engine_from_config, async_sessionmaker

from alembic import context
from src.core.config import settings
from src.infrastructure.persistence.base import BaseModel

import src.infrastructure.persistence.models  # noqa: E402, F401  (registers tables)

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.database_url)

target_metadata = BaseModel.metadata

_TRUTHY = {"1", "true", "yes", "y"}


def run_migrations_offline() -> None:
    """Emit migration SQL for the configured URL without connecting."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


def _seeding_requested() -> bool:
    """Seed on ``upgrade`` unless ``-x seed=...`` says otherwise."""
    flag = context.get_x_argument(as_dictionary=True).get("seed")
    if flag is not None:
        return flag.strip().lower() in _TRUTHY

    cmd_opts = getattr(config, "cmd_opts", None)
    return getattr(cmd_opts, "cmd", None) == "upgrade" and not getattr(
        cmd_opts, "sql", False
    )


async def _seed(engine: AsyncEngine) -> None:
    # seeds/ lives next to this file and is not part of the installed package
    alembic_dir = os.path.dirname(__file__)
    if alembic_dir not in sys.path:
        sys.path.insert(0, alembic_dir)

    from seeds import run_all_seeders  # noqa: E402

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        await run_all_seeders(session)
        await session.commit()


async def run_async_migrations() -> None:
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    try:
        async with engine.connect() as connection:
            await connection.run_sync(do_run_migrations)

        if _seeding_requested():
            await _seed(engine)
    finally:
        await engine.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
