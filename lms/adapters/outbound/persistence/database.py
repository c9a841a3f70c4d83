# lms/adapters/outbound/persistence/database.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base

from lms.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

# ─── Base definition ──────────────────────────────────────────────────────────
# Parent class of every ORM model, holds the shared metadata
Base = declarative_base()
# ────────────────────────────────────────────────────────────────────────────────

# Async drivers only: swap a sync psycopg2 URL for asyncpg
database_url = str(settings.DATABASE_URL).replace('postgresql+psycopg2', 'postgresql+asyncpg')
logger.info(f"Connecting to database: {database_url.split('@')[-1]}")


def engine_options(url: str) -> dict:
    """Pool options for the given URL; SQLite uses a static pool without sizing."""
    if make_url(url).get_backend_name() == "sqlite":
        return {}
    return {
        "pool_size": 20,
        "max_overflow": 10,
        "pool_timeout": 30,
        "pool_recycle": 1800,
        "pool_pre_ping": True,
    }


try:
    # Create async engine
    engine = create_async_engine(
        database_url,
        echo=False,
        **engine_options(database_url),
    )

    # Create async session factory
    AsyncSessionLocal = async_sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        expire_on_commit=False,
    )

    logger.info("Async database connection configured successfully")

except SQLAlchemyError as e:
    logger.error(f"Error connecting to database: {str(e)}")
    raise


@asynccontextmanager
async def get_db_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Provides an async context for database operations,
    ensuring the session is closed at the end.

    Yields:
        AsyncSession: SQLAlchemy async session

    Example:
        ```python
        async with get_db_context() as db:
            await token_repository.cleanup_expired(db)
        ```
    """
    session = AsyncSessionLocal()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency injection for use with FastAPI.

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    async with get_db_context() as session:
        yield session
