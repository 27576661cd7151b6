"""Company search endpoints."""

from typing import Literal

import structlog
from fastapi import APIRouter, Query
from fastapi.responses import Response, StreamingResponse

from techstack.api.deps import Snapshot
from techstack.schemas.company import CompanyResponse, FilterOptions, SearchResponse
from techstack.schemas.filters import FilterSpec
from techstack.services.export import iter_csv, to_json
from techstack.services.search.catalog import CatalogSnapshot
from techstack.services.search.entities import CompanyEntity
from techstack.services.search.filter_engine import SortField, paginate, search, sort_companies

logger = structlog.get_logger()

router = APIRouter()

EXPORT_FILENAME = "techstack_explorer_results"


def run_search(
    snapshot: CatalogSnapshot,
    filters: FilterSpec,
    sort_by: SortField | None = None,
    sort_order: str = "asc",
) -> list[CompanyEntity]:
    """Filter the snapshot and apply an explicit ordering when requested."""
    results = search(snapshot.companies, filters, snapshot.index)
    if sort_by is not None:
        results = sort_companies(results, sort_by, descending=sort_order == "desc")

    logger.info(
        "Search completed",
        total=len(results),
        catalog_size=len(snapshot.companies),
        has_search=filters.has_search,
        sort_by=sort_by,
    )
    return results


@router.post("", response_model=SearchResponse)
async def search_companies(
    snapshot: Snapshot,
    filters: FilterSpec | None = None,
    sort_by: SortField | None = None,
    sort_order: str = Query("asc", pattern="^(asc|desc)$"),
    page: int = Query(1, ge=1),
    per_page: int | None = Query(None, ge=1, le=500),
) -> SearchResponse:
    """
    Search companies with structured filters and optional free text.

    Without ``sort_by`` results keep relevance order (text search) or
    catalog order. Paginated requests without ``sort_by`` are sorted by
    name so pages stay stable.
    """
    filters = filters or FilterSpec()

    if per_page is not None and sort_by is None:
        sort_by = "name"

    results = run_search(snapshot, filters, sort_by, sort_order)
    total = len(results)

    if per_page is not None:
        items, pages = paginate(results, page, per_page)
    else:
        items, pages = results, 1

    return SearchResponse(
        results=[CompanyResponse.model_validate(company) for company in items],
        total=total,
        page=page if per_page is not None else 1,
        per_page=per_page,
        pages=pages,
    )


@router.get("/options", response_model=FilterOptions)
async def get_filter_options(snapshot: Snapshot) -> FilterOptions:
    """List the facet values available for filtering."""
    return snapshot.options


@router.post("/export")
async def export_search_results(
    snapshot: Snapshot,
    filters: FilterSpec | None = None,
    format: Literal["csv", "json"] = "csv",
    sort_by: SortField | None = None,
    sort_order: str = Query("asc", pattern="^(asc|desc)$"),
):
    """
    Export search results as CSV or JSON.

    ## CSV Columns

    - name, domain, industry, category, hq_country, founded
    - revenue_usd, employees, tech_count
    - technologies, office_locations (joined with "; ")

    ## Example

    ```bash
    curl -X POST -H "Content-Type: application/json" -d '{"countries": ["UK"]}' \\
      -o results.csv "http://localhost:8000/api/v1/search/export?format=csv"
    ```
    """
    results = run_search(snapshot, filters or FilterSpec(), sort_by, sort_order)

    if format == "json":
        return Response(
            content=to_json(results),
            media_type="application/json",
            headers={
                "Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}.json"',
            },
        )

    return StreamingResponse(
        iter_csv(results),
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}.csv"',
        },
    )
