# alembic/env.py
import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

import healthsync.db.models  # noqa: F401  (every table has to be on Base.metadata)
from healthsync.config.settings import settings
from healthsync.db.base import Base

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def database_urls() -> tuple:
    """
    (async_url, sync_url). `alembic -x dburl=...` wins over DATABASE_URL so a
    migration can target another database without touching the env file.
    """
    async_url = context.get_x_argument(as_dictionary=True).get("dburl") or settings.database_url
    sync_url = async_url.replace("+asyncpg", "").replace("+aiosqlite", "")
    return async_url, sync_url


def run_migrations_offline() -> None:
    _, sync_url = database_urls()
    context.configure(
        url=sync_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        # sqlite cannot ALTER constraints in place
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    async_url, _ = database_urls()
    engine = create_async_engine(async_url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
