"""Company schemas for search responses."""

from datetime import datetime
from typing import TYPE_CHECKING, Iterable

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from techstack.services.search.entities import CompanyEntity


class CompanyResponse(BaseModel):
    """A company with every indexed and filterable field."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    domain: str = ""
    industry: str = ""
    category: str = ""
    hq_country: str = ""
    founded: int | None = None
    revenue: int = 0
    employees: int = 0
    technologies: list[str] = []
    office_locations: list[str] = []


class SearchResponse(BaseModel):
    """Canonical search envelope."""

    results: list[CompanyResponse]
    total: int
    page: int = 1
    per_page: int | None = None
    pages: int = 1


class FilterOptions(BaseModel):
    """Distinct facet values present in the catalog."""

    technologies: list[str] = []
    industries: list[str] = []
    categories: list[str] = []
    countries: list[str] = []
    office_locations: list[str] = []

    @classmethod
    def from_companies(cls, companies: Iterable["CompanyEntity"]) -> "FilterOptions":
        technologies: set[str] = set()
        industries: set[str] = set()
        categories: set[str] = set()
        countries: set[str] = set()
        office_locations: set[str] = set()

        for company in companies:
            technologies.update(company.technologies)
            office_locations.update(company.office_locations)
            if company.industry:
                industries.add(company.industry)
            if company.category:
                categories.add(company.category)
            if company.hq_country:
                countries.add(company.hq_country)

        return cls(
            technologies=sorted(technologies),
            industries=sorted(industries),
            categories=sorted(categories),
            countries=sorted(countries),
            office_locations=sorted(office_locations),
        )


class RefreshResponse(BaseModel):
    """Result of a catalog rebuild."""

    total: int
    built_at: datetime
