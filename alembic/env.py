"""Alembic environment: migrations for the boards, cards, and tokens tables.

Design Decisions:
    - Database URL comes from Settings, so migrations and the app read the
      same DATABASE_URL with the same postgresql+asyncpg conversion
    - NullPool: a migration run opens one connection and exits
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

import kanban_api.models  # noqa: F401  (registers tables on Base.metadata)
from kanban_api.config import get_settings
from kanban_api.db.base import Base

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)

target_metadata = Base.metadata
database_url = get_settings().database_url


def _migrate(connection: Connection | None = None) -> None:
    if connection is None:
        context.configure(
            url=database_url,
            target_metadata=target_metadata,
            literal_binds=True,
            dialect_opts={"paramstyle": "named"},
        )
    else:
        context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    engine = create_async_engine(database_url, poolclass=pool.NullPool)
    async with engine.connect() as connection:
        await connection.run_sync(_migrate)
    await engine.dispose()


if context.is_offline_mode():
    _migrate()
else:
    asyncio.run(_migrate_online())
