"""
Alembic environment: runs the revisions in `versions/` over asyncpg.

The database URL comes from `config.attributes["database_url"]` when the app
runs the upgrade at startup, and from `DATABASE_URL` when the `alembic` CLI
is used.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool, text
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from core import db
from core.config import load_settings

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

# Revisions are raw SQL, there is no model metadata to autogenerate from.
target_metadata = None

# Held for the whole run so replicas starting together apply each revision once.
ADVISORY_LOCK_KEY = 4_224_202_409


def _sqlalchemy_url() -> str:
    url = config.attributes.get("database_url") or db.database_url(load_settings())
    scheme, sep, rest = url.partition("://")
    if scheme in ("postgres", "postgresql"):
        scheme = "postgresql+asyncpg"
    return f"{scheme}{sep}{rest}"


def run_migrations_offline() -> None:
    """Emit the SQL to stdout instead of running it (`alembic upgrade head --sql`)."""
    context.configure(
        url=_sqlalchemy_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.execute(text(f"SELECT pg_advisory_xact_lock({ADVISORY_LOCK_KEY})"))
        context.run_migrations()


async def run_async_migrations() -> None:
    engine = create_async_engine(_sqlalchemy_url(), poolclass=pool.NullPool)

    async with engine.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await engine.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
