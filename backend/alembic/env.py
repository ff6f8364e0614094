"""
Notes API — Alembic Environment
=================================

Migrates the single `notes` table (revision 001) for STORAGE_BACKEND=database.

The URL always comes from notes_api settings (DATABASE_URL), never from
alembic.ini, so the app and its migrations cannot point at different
databases. SQLite cannot ALTER most columns in place, so SQLite URLs get
batch mode; PostgreSQL runs plain DDL.

    cd backend
    DATABASE_URL=postgresql+asyncpg://... alembic upgrade head
    alembic upgrade head --sql      # offline: print DDL only
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine
from alembic import context

from notes_api.config import settings
from notes_api.database import Base
from notes_api.models.note import Note  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _configure(**kwargs) -> None:
    # compare_type catches VARCHAR(100)/VARCHAR(5000) limit changes on autogenerate
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=settings.is_sqlite,
        **kwargs,
    )


def run_migrations_offline() -> None:
    _configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Apply pending revisions over a throwaway async engine (no pooling)."""
    engine = create_async_engine(settings.database_url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_with_connection)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
