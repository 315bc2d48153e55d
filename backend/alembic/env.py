"""
Bev's Bakery Backend - Migration Environment
=============================================

What:  Applies the migrations in alembic/versions to the orders database.
How:   The target URL is `sqlalchemy.url` when a caller set one on the
       Config (tests, one-off scripts), otherwise bakery.config.settings.
       Migrations run over the same async drivers as the app (asyncpg,
       aiosqlite) through AsyncConnection.run_sync().

Usage:
    cd backend
    alembic upgrade head                # apply
    alembic downgrade base              # drop the orders table
    alembic upgrade head --sql          # print the SQL only
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from bakery.config import settings
from bakery.database import Base
from bakery.models.order import Order  # noqa: F401  (registers the table)

alembic_config = context.config

# Programmatic callers (the test suite) keep their own logging setup
if alembic_config.config_file_name and alembic_config.attributes.get("configure_logger", True):
    fileConfig(alembic_config.config_file_name)


def database_url() -> str:
    return alembic_config.get_main_option("sqlalchemy.url") or settings.database_url


def _configure(**kwargs) -> None:
    url = database_url()
    context.configure(
        target_metadata=Base.metadata,
        compare_type=True,
        # SQLite cannot ALTER most columns; batch mode recreates the table
        render_as_batch=url.startswith("sqlite"),
        **kwargs,
    )


def _migrate(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    engine = create_async_engine(database_url(), poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    _configure(url=database_url(), literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()
else:
    asyncio.run(_migrate_online())
