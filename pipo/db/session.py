"""SQLAlchemy database session management.

This module provides SQLAlchemy ORM sessions for every feature: accounts,
pet tags and pet profiles all live in the same relational store.
"""

from collections.abc import AsyncGenerator
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from datetime import UTC, datetime
from typing import Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from pipo.core.settings import get_settings


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


def utcnow() -> datetime:
    """Timezone-aware now, used as a Python-side column default."""
    return datetime.now(UTC)


# Global engine and session factory
_engine: AsyncEngine | None = None
_async_session_maker: async_sessionmaker[AsyncSession] | None = None


def init_db_session() -> None:
    """Initialize the database session factory."""
    global _engine, _async_session_maker

    if _async_session_maker is not None:
        return  # Already initialized

    settings = get_settings()

    _engine = create_async_engine(
        str(settings.database_url),
        echo=settings.debug,
        pool_pre_ping=True,
    )

    _async_session_maker = async_sessionmaker(
        bind=_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_all_tables() -> None:
    """Create missing tables, used for local SQLite runs without migrations."""
    init_db_session()
    if _engine is None:
        raise RuntimeError("Failed to initialize database engine")

    # Register every model on Base.metadata
    from pipo.features.auth import models as _auth_models  # noqa: F401
    from pipo.features.pets import models as _pet_models  # noqa: F401
    from pipo.features.tags import models as _tag_models  # noqa: F401

    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db_session() -> None:
    """Dispose the engine and forget the session factory."""
    global _engine, _async_session_maker

    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _async_session_maker = None


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session."""
    if _async_session_maker is None:
        init_db_session()

    if _async_session_maker is None:
        raise RuntimeError("Failed to initialize database session")

    async with _async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()


def get_session_factory() -> SessionFactory:
    """FastAPI dependency returning the session factory handed to use cases.

    Tests override this to point use cases at their own engine.
    """
    return get_db_session
