"""Company catalog: the current collection and the text index built over it."""

import asyncio
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import cached_property, partial
from typing import Any, Awaitable, Callable, Sequence

import structlog

from techstack.exceptions import CatalogUnavailable
from techstack.models.database import async_session_maker
from techstack.repositories.company_repo import CompanyRepository
from techstack.schemas.company import FilterOptions
from techstack.services.search.entities import CompanyEntity
from techstack.services.search.text_index import TextIndex

logger = structlog.get_logger()

Loader = Callable[[], Awaitable[Sequence[CompanyEntity]]]


@dataclass(frozen=True, eq=False)
class CatalogSnapshot:
    """An immutable collection together with its text index."""

    companies: tuple[CompanyEntity, ...]
    index: TextIndex
    built_at: datetime
    loaded_at: float = field(default_factory=time.monotonic)
    by_id: dict[int, CompanyEntity] = field(default_factory=dict)

    @classmethod
    def build(cls, companies: Sequence[CompanyEntity], **index_options: Any) -> "CatalogSnapshot":
        companies = tuple(companies)
        return cls(
            companies=companies,
            index=TextIndex.build(companies, **index_options),
            built_at=datetime.now(timezone.utc),
            by_id={company.id: company for company in companies},
        )

    def get(self, company_id: int) -> CompanyEntity | None:
        return self.by_id.get(company_id)

    @cached_property
    def options(self) -> FilterOptions:
        """Facet values available for filtering and translation."""
        return FilterOptions.from_companies(self.companies)


async def load_from_store() -> list[CompanyEntity]:
    """Bulk-read every company from the database."""
    async with async_session_maker() as session:
        repo = CompanyRepository(session)
        records = await repo.fetch_all()
    return [CompanyEntity.from_record(record) for record in records]


class CompanyCatalog:
    """
    Holder of the current company collection and its index.

    Readers grab the current snapshot reference and use it for the whole
    request. A refresh loads the collection, builds a complete new snapshot
    off the event loop and only then swaps the reference, so in-flight
    queries never see a half-built index.

    After a failed load, readers do not touch the store again for
    ``retry_after_seconds``: they get the previous snapshot, or
    CatalogUnavailable when there is none. ``refresh()`` always retries.

    Usage:
        catalog = CompanyCatalog(load_from_store, ttl_seconds=300)
        snapshot = await catalog.snapshot()
        results = search(snapshot.companies, spec, snapshot.index)
    """

    def __init__(
        self,
        loader: Loader = load_from_store,
        ttl_seconds: float = 0,
        index_options: dict[str, Any] | None = None,
        retry_after_seconds: float = 5.0,
    ):
        self._loader = loader
        self.ttl_seconds = ttl_seconds
        self.index_options = index_options or {}
        self.retry_after_seconds = retry_after_seconds
        self._snapshot: CatalogSnapshot | None = None
        self._failed_at: float | None = None
        self._lock = asyncio.Lock()

    @property
    def current(self) -> CatalogSnapshot | None:
        return self._snapshot

    def _expired(self, snapshot: CatalogSnapshot) -> bool:
        if self.ttl_seconds <= 0:
            return False
        return time.monotonic() - snapshot.loaded_at >= self.ttl_seconds

    def _backing_off(self) -> bool:
        if self._failed_at is None:
            return False
        return time.monotonic() - self._failed_at < self.retry_after_seconds

    async def snapshot(self) -> CatalogSnapshot:
        """Current snapshot, loading or reloading it when needed."""
        snapshot = self._snapshot
        if snapshot is not None and not self._expired(snapshot):
            return snapshot

        try:
            return await self._reload(stale=snapshot)
        except CatalogUnavailable:
            if snapshot is None:
                raise
            logger.warning("Serving expired catalog after failed reload", total=len(snapshot.companies))
            return snapshot

    async def refresh(self) -> CatalogSnapshot:
        """Force a reload and swap in the new snapshot."""
        return await self._reload(stale=self._snapshot, force=True)

    async def _reload(self, stale: CatalogSnapshot | None, force: bool = False) -> CatalogSnapshot:
        async with self._lock:
            if not force:
                # Another request may have swapped in a new snapshot while we waited
                if self._snapshot is not stale and self._snapshot is not None:
                    return self._snapshot
                if self._backing_off():
                    raise CatalogUnavailable("Company store unavailable, waiting before retrying")

            try:
                companies = await self._loader()
            except CatalogUnavailable:
                self._failed_at = time.monotonic()
                raise
            except Exception as e:
                self._failed_at = time.monotonic()
                logger.error("Company store read failed", error=str(e))
                raise CatalogUnavailable(f"Could not load companies: {e}") from e

            loop = asyncio.get_running_loop()
            snapshot = await loop.run_in_executor(
                None,
                partial(CatalogSnapshot.build, companies, **self.index_options),
            )
            self._snapshot = snapshot
            self._failed_at = None

            logger.info(
                "Company catalog rebuilt",
                total=len(snapshot.companies),
                vocabulary=snapshot.index.vocabulary_size,
            )
            return snapshot
