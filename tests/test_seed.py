"""Tests for store seeding and bulk reads."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from techstack.data.companies import SEED_COMPANIES
from techstack.data.seed import seed_database
from techstack.exceptions import SeedIncomplete
from techstack.models import Base
from techstack.models.database import has_companies_table
from techstack.repositories.company_repo import CompanyRepository
from techstack.services.search.entities import CompanyEntity
from techstack.workers.tasks import seed as seed_tasks


def make_engine():
    return create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest_asyncio.fixture
async def engine():
    engine = make_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.mark.asyncio
async def test_companies_table_check(engine):
    """A migrated store has the table; an empty database does not."""
    assert await has_companies_table(engine)

    empty = make_engine()
    try:
        assert not await has_companies_table(empty)
    finally:
        await empty.dispose()


def test_seed_task_retries_partial_run(monkeypatch):
    """A run that stops early goes through retry instead of reporting success."""
    async def partial_seed(batch_size):
        return 5

    monkeypatch.setattr(seed_tasks, "_seed", partial_seed)

    with pytest.raises(SeedIncomplete):
        seed_tasks.seed_companies(batch_size=5)


def test_seed_task_reports_full_run(monkeypatch):
    async def full_seed(batch_size):
        return len(SEED_COMPANIES)

    monkeypatch.setattr(seed_tasks, "_seed", full_seed)

    result = seed_tasks.seed_companies()
    assert result == {"success": True, "written": 12, "total": 12}


@pytest.mark.asyncio
async def test_seed_writes_every_company(session_maker):
    """Twelve companies in batches of five take three commits."""
    written = await seed_database(session_maker, SEED_COMPANIES, batch_size=5)
    assert written == 12

    async with session_maker() as session:
        repo = CompanyRepository(session)
        assert await repo.count() == 12
        records = await repo.fetch_all()

    assert [record.id for record in records] == list(range(1, 13))
    assert records[8].technologies == ["Python", "Go", "AWS", "Kubernetes", "Elasticsearch"]


@pytest.mark.asyncio
async def test_reseeding_is_idempotent(session_maker):
    await seed_database(session_maker, SEED_COMPANIES)
    await seed_database(session_maker, SEED_COMPANIES)

    async with session_maker() as session:
        assert await CompanyRepository(session).count() == 12


@pytest.mark.asyncio
async def test_seed_stops_at_first_failed_batch(session_maker):
    """Earlier batches stay committed; later ones are not attempted."""
    rows = [*SEED_COMPANIES[:5], {"id": 99}, *SEED_COMPANIES[5:]]

    written = await seed_database(session_maker, rows, batch_size=5)
    assert written == 5

    async with session_maker() as session:
        assert await CompanyRepository(session).count() == 5


@pytest.mark.asyncio
async def test_seed_rejects_bad_batch_size(session_maker):
    with pytest.raises(ValueError):
        await seed_database(session_maker, SEED_COMPANIES, batch_size=0)


@pytest.mark.asyncio
async def test_records_convert_to_entities(session_maker):
    """Stored rows round-trip into the same entities as the seed data."""
    await seed_database(session_maker, SEED_COMPANIES)

    async with session_maker() as session:
        records = await CompanyRepository(session).fetch_all()

    entities = [CompanyEntity.from_record(record) for record in records]
    assert entities == [CompanyEntity.from_mapping(row) for row in SEED_COMPANIES]
