"""
Database Session Management

Provides SQLAlchemy engine and session factory for async database access.
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
)
from loguru import logger

from config import settings


# Global engine instance
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_database_url() -> str:
    """Get async database URL for SQLAlchemy."""
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    return f"sqlite+aiosqlite:///{settings.DATABASE_PATH}"


async def init_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Initialize the database engine.

    Called once at application startup. database_url overrides the
    configured location (used by scripts pointing at another database).
    """
    global _engine, _session_factory

    if _engine is not None:
        return _engine

    database_url = database_url or get_database_url()
    logger.info(f"Initializing database engine: {database_url}")

    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    _engine = create_async_engine(
        database_url,
        echo=settings.LOG_LEVEL == "DEBUG",
        connect_args=connect_args,
    )

    _session_factory = async_sessionmaker(
        bind=_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    logger.info("Database engine initialized successfully")
    return _engine


async def close_engine() -> None:
    """Close the database engine."""
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None
        logger.info("Database engine closed")


@asynccontextmanager
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get a database session as async context manager.

    Usage:
        async with get_session() as session:
            result = await session.execute(...)

    The session is automatically committed on success,
    or rolled back on exception.
    """
    if _session_factory is None:
        await init_engine()

    session = _session_factory()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
