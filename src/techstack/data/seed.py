"""Batched seeding of the company store."""

from typing import Any, Sequence

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from techstack.data.companies import SEED_COMPANIES
from techstack.repositories.company_repo import CompanyRepository

logger = structlog.get_logger()

DEFAULT_BATCH_SIZE = 499


async def seed_database(
    session_maker: async_sessionmaker[AsyncSession],
    companies: Sequence[dict[str, Any]] = SEED_COMPANIES,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> int:
    """
    Upsert companies in batches, one transaction per batch.

    Stops at the first batch that fails to commit; batches already
    committed stay in place.

    Returns:
        Number of companies written
    """
    if batch_size < 1:
        raise ValueError("batch_size must be positive")

    logger.info("Seeding companies", total=len(companies), batch_size=batch_size)

    written = 0
    for start in range(0, len(companies), batch_size):
        chunk = companies[start:start + batch_size]
        batch_number = start // batch_size + 1

        async with session_maker() as session:
            try:
                repo = CompanyRepository(session)
                await repo.upsert_many(chunk)
                await session.commit()
            except Exception as e:
                await session.rollback()
                logger.error("Seed batch failed", batch=batch_number, error=str(e))
                break

        written += len(chunk)
        logger.info("Committed seed batch", batch=batch_number, size=len(chunk))

    logger.info("Seeding finished", written=written, total=len(companies))
    return written
