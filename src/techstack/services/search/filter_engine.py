"""Filter engine: text-index resolution followed by structured predicates."""

from typing import Callable, Literal, Sequence, TypeVar

import structlog

from techstack.schemas.filters import FilterSpec
from techstack.services.search.entities import CompanyEntity
from techstack.services.search.text_index import TextIndex

logger = structlog.get_logger()

Predicate = Callable[[CompanyEntity], bool]

T = TypeVar("T")

SortField = Literal[
    "name",
    "domain",
    "industry",
    "category",
    "hq_country",
    "founded",
    "revenue",
    "employees",
    "tech_count",
    "office_location_count",
]

SORT_KEYS: dict[str, Callable[[CompanyEntity], object]] = {
    "name": lambda c: c.name.casefold(),
    "domain": lambda c: c.domain.casefold(),
    "industry": lambda c: c.industry.casefold(),
    "category": lambda c: c.category.casefold(),
    "hq_country": lambda c: c.hq_country.casefold(),
    "founded": lambda c: c.founded or 0,
    "revenue": lambda c: c.revenue,
    "employees": lambda c: c.employees,
    "tech_count": lambda c: c.tech_count,
    "office_location_count": lambda c: c.office_location_count,
}


def _in_range(value: int, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= value <= bounds[1]


def build_predicates(spec: FilterSpec) -> list[tuple[str, Predicate]]:
    """
    Translate a filter spec into named predicates.

    Only constraining fields produce a predicate. Every predicate is a pure
    function of one entity, so they can be evaluated in any order.
    """
    predicates: list[tuple[str, Predicate]] = []

    if spec.industries:
        industries = frozenset(spec.industries)
        predicates.append(("industries", lambda c: c.industry in industries))

    if spec.categories:
        categories = frozenset(spec.categories)
        predicates.append(("categories", lambda c: c.category in categories))

    if spec.countries:
        countries = frozenset(spec.countries)
        predicates.append(("countries", lambda c: c.hq_country in countries))

    if spec.office_locations:
        locations = frozenset(spec.office_locations)
        predicates.append(
            ("office_locations", lambda c: not locations.isdisjoint(c.office_location_set))
        )

    if spec.technologies_not:
        excluded = frozenset(spec.technologies_not)
        predicates.append(("technologies_not", lambda c: excluded.isdisjoint(c.technology_set)))

    if spec.technologies_and:
        required = frozenset(spec.technologies_and)
        predicates.append(("technologies_and", lambda c: required <= c.technology_set))

    # OR is a hard constraint, with or without AND terms
    if spec.technologies_or:
        any_of = frozenset(spec.technologies_or)
        predicates.append(("technologies_or", lambda c: not any_of.isdisjoint(c.technology_set)))

    tech_count = spec.tech_count
    predicates.append(("tech_count", lambda c: _in_range(c.tech_count, tech_count)))

    office_location_count = spec.office_location_count
    predicates.append(
        (
            "office_location_count",
            lambda c: _in_range(c.office_location_count, office_location_count),
        )
    )

    if spec.employee_count is not None:
        employee_count = spec.employee_count
        predicates.append(("employee_count", lambda c: _in_range(c.employees, employee_count)))

    if spec.min_revenue is not None:
        min_revenue = spec.min_revenue.amount
        predicates.append(("min_revenue", lambda c: c.revenue >= min_revenue))

    if spec.max_revenue is not None:
        max_revenue = spec.max_revenue.amount
        predicates.append(("max_revenue", lambda c: c.revenue <= max_revenue))

    if spec.founded_year:
        founded_year = spec.founded_year
        predicates.append(("founded_year", lambda c: c.founded == founded_year))

    return predicates


def resolve_candidates(
    entities: Sequence[CompanyEntity],
    spec: FilterSpec,
    index: TextIndex | None = None,
) -> list[CompanyEntity]:
    """Candidate set before structured predicates: text matches or everything."""
    if not spec.has_search:
        return list(entities)

    if index is None:
        index = TextIndex.build(entities)

    by_id = {entity.id: entity for entity in entities}
    candidates = []
    stale = 0
    for doc_id in index.query(spec.search):
        entity = by_id.get(doc_id)
        if entity is None:
            # Index built from an older collection
            stale += 1
            continue
        candidates.append(entity)

    if stale:
        logger.debug("Skipped stale index ids", count=stale, query=spec.search)

    return candidates


def search(
    entities: Sequence[CompanyEntity],
    spec: FilterSpec,
    index: TextIndex | None = None,
) -> list[CompanyEntity]:
    """
    Apply a filter spec to a company collection.

    Args:
        entities: Full collection to search
        spec: Validated filter specification
        index: Prebuilt text index over ``entities`` (built on demand if omitted)

    Returns:
        Matching companies, in relevance order when ``spec.search`` is set,
        otherwise in collection order
    """
    candidates = resolve_candidates(entities, spec, index)
    predicates = [predicate for _, predicate in build_predicates(spec)]

    return [
        company for company in candidates
        if all(predicate(company) for predicate in predicates)
    ]


def sort_companies(
    companies: Sequence[CompanyEntity],
    sort_by: SortField = "name",
    descending: bool = False,
) -> list[CompanyEntity]:
    """Sort by one field, ties broken by id ascending in both directions."""
    key = SORT_KEYS[sort_by]
    by_id = sorted(companies, key=lambda c: c.id)
    # sorted() is stable with reverse=True, so the id order survives
    return sorted(by_id, key=key, reverse=descending)


def paginate(items: Sequence[T], page: int, per_page: int) -> tuple[list[T], int]:
    """Slice one page out of ``items``; returns the page and total pages."""
    total = len(items)
    pages = (total + per_page - 1) // per_page if total > 0 else 0
    offset = (page - 1) * per_page
    return list(items[offset:offset + per_page]), pages
