"""Company store connection and session management."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from techstack.config import settings

logger = structlog.get_logger()

COMPANIES_TABLE = "companies"

# Shared engine for the API process
async_engine = create_async_engine(
    settings.database_url,
    pool_size=settings.database_pool_size,
    max_overflow=settings.database_max_overflow,
    echo=settings.database_echo,
    pool_pre_ping=True,
)

async_session_maker = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def worker_session_maker() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Session factory on a throwaway unpooled engine.

    Celery tasks run each job in a fresh event loop, so they cannot share
    the pooled API engine.
    """
    engine = create_async_engine(settings.database_url, poolclass=NullPool, echo=settings.database_echo)
    try:
        yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    finally:
        await engine.dispose()


async def has_companies_table(engine: AsyncEngine) -> bool:
    """Check that the companies table has been migrated."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
        return await conn.run_sync(lambda sync_conn: inspect(sync_conn).has_table(COMPANIES_TABLE))


async def init_db() -> None:
    """Verify the company store is reachable and migrated."""
    if await has_companies_table(async_engine):
        logger.info("Company store ready", table=COMPANIES_TABLE)
    else:
        logger.warning("Companies table missing, run `alembic upgrade head`", table=COMPANIES_TABLE)


async def close_db() -> None:
    """Close database connections."""
    await async_engine.dispose()
