"""Company repository for data access."""

from typing import Any, Iterable

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from techstack.models.company import Company


class CompanyRepository:
    """Repository for bulk Company reads and seeding writes.

    The store is a plain bulk-object provider: no filtering is pushed down
    to the database, every query reads the whole collection.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def fetch_all(self) -> list[Company]:
        """Fetch every company document."""
        result = await self.db.execute(select(Company).order_by(Company.id))
        return list(result.scalars().all())

    async def count(self) -> int:
        """Count stored companies."""
        result = await self.db.execute(select(func.count()).select_from(Company))
        return result.scalar_one()

    async def upsert_many(self, rows: Iterable[dict[str, Any]]) -> int:
        """Insert or replace companies keyed by id."""
        written = 0
        for row in rows:
            await self.db.merge(
                Company(
                    id=row["id"],
                    name=row["name"],
                    domain=row.get("domain") or "",
                    industry=row.get("industry") or "",
                    category=row.get("category") or "",
                    hq_country=row.get("hq_country") or "",
                    founded=row.get("founded") or None,
                    revenue=row.get("revenue") or 0,
                    employees=row.get("employees") or 0,
                    technologies=list(row.get("technologies") or []),
                    office_locations=list(row.get("office_locations") or []),
                )
            )
            written += 1

        await self.db.flush()

        return written
