"""Store seeding tasks for Celery."""

import asyncio

import structlog
from celery import shared_task

from techstack.config import settings
from techstack.data.companies import SEED_COMPANIES
from techstack.data.seed import seed_database
from techstack.exceptions import SeedIncomplete
from techstack.models.database import worker_session_maker

logger = structlog.get_logger()


async def _seed(batch_size: int) -> int:
    async with worker_session_maker() as session_maker:
        return await seed_database(session_maker, SEED_COMPANIES, batch_size=batch_size)


@shared_task(bind=True, max_retries=2, default_retry_delay=30)
def seed_companies(self, batch_size: int | None = None):
    """Write the bundled sample companies to the store.

    Seeding is an idempotent upsert, so a partial run is retried from the
    start.
    """
    total = len(SEED_COMPANIES)
    try:
        written = asyncio.run(_seed(batch_size or settings.seed_batch_size))
        if written < total:
            raise SeedIncomplete(f"Seeded {written} of {total} companies")
    except Exception as e:
        logger.error("Seeding task failed", error=str(e), retries=self.request.retries)
        raise self.retry(exc=e)

    return {"success": True, "written": written, "total": total}
