"""Shared test fixtures."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from techstack.api.deps import get_catalog, get_translator
from techstack.data.companies import SEED_COMPANIES
from techstack.exceptions import TranslationFailure
from techstack.main import create_app
from techstack.schemas.ai import FilterSuggestions
from techstack.schemas.filters import FilterSpec
from techstack.services.search.catalog import CompanyCatalog
from techstack.services.search.entities import CompanyEntity


def make_company(id: int, name: str | None = None, **fields) -> CompanyEntity:
    """Build a company with sensible defaults for the fields a test ignores."""
    fields.setdefault("technologies", ())
    fields.setdefault("office_locations", ())
    return CompanyEntity(
        id=id,
        name=name or f"Company {id}",
        technologies=tuple(fields.pop("technologies")),
        office_locations=tuple(fields.pop("office_locations")),
        **fields,
    )


class FakeTranslator:
    """Translator returning canned results, or failing on demand."""

    def __init__(self):
        self.spec = FilterSpec()
        self.suggestions = FilterSuggestions()
        self.fail = False
        self.queries: list[str] = []

    async def translate(self, query, options):
        self.queries.append(query)
        if self.fail:
            raise TranslationFailure("model unavailable")
        return self.spec

    async def suggest(self, initial_input, options):
        self.queries.append(initial_input)
        if self.fail:
            raise TranslationFailure("model unavailable")
        return self.suggestions


@pytest.fixture
def companies() -> list[CompanyEntity]:
    return [CompanyEntity.from_mapping(row) for row in SEED_COMPANIES]


@pytest.fixture
def catalog(companies) -> CompanyCatalog:
    async def loader():
        return companies

    return CompanyCatalog(loader=loader)


@pytest.fixture
def translator() -> FakeTranslator:
    return FakeTranslator()


@pytest.fixture
def app(catalog, translator):
    application = create_app()
    application.dependency_overrides[get_catalog] = lambda: catalog
    application.dependency_overrides[get_translator] = lambda: translator
    return application


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
