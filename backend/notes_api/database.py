"""
Notes API — Database Session Management
=========================================

What:  Async SQLAlchemy engine, session factory, and per-request session scope.
Why:   Centralizes all database connection logic for the database storage backend.
How:   Lazily creates an async engine on first use, provides a per-request
       session scope that rolls back on error and always closes.
Who:   Used by the notes repository dependency and the health check.
When:  Engine is created on first access; sessions are created per-request.

The engine is lazy because the default storage backend is in-memory and never
needs a database driver. Pool sizing is applied only to server databases;
SQLite URLs keep SQLAlchemy's own pool choice.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from notes_api.config import settings

logger = logging.getLogger(__name__)

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, used by create_tables() and by Alembic
    for autogenerate.
    """
    pass


# ── Engine & Session Factory ──────────────────────────────────────────────
def get_engine() -> AsyncEngine:
    """Return the process-wide async engine, creating it on first call."""
    global _engine
    if _engine is None:
        kwargs = {"echo": settings.log_level == "DEBUG"}
        if not settings.is_sqlite:
            kwargs.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_pre_ping=settings.db_pool_pre_ping,
                pool_recycle=3600,
            )
        _engine = create_async_engine(settings.database_url, **kwargs)
        logger.info("Database engine created for %s", _engine.url.render_as_string(hide_password=True))
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Return the session factory bound to the engine.

    expire_on_commit=False keeps the returned Note readable after the
    repository's commit, when the response is serialized.
    """
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _session_factory


# ── Session Scope ─────────────────────────────────────────────────────────
@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """
    Provide a database session for the duration of one request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the caller (the repository performs and commits the write)
        3. On error: rolls back and re-raises
        4. Always: closes the session (returns connection to pool)

    Example usage in a dependency:
        async with session_scope() as session:
            yield SqlAlchemyNoteRepository(session)
    """
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables() -> None:
    """
    Create all tables registered on Base.metadata if they don't exist.

    Used at startup for SQLite databases. Server databases are migrated
    with Alembic instead.
    """
    # Registers the notes table on Base.metadata
    from notes_api.models import note  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def check_connection() -> bool:
    """Run SELECT 1 against the database; True if it answered."""
    try:
        async with get_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning("Database connectivity check failed: %s", str(e))
        return False


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
