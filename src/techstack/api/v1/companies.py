"""Company lookup and catalog refresh endpoints."""

from fastapi import APIRouter, HTTPException, status

from techstack.api.deps import Catalog, Snapshot
from techstack.schemas.company import CompanyResponse, RefreshResponse

router = APIRouter()


@router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(
    company_id: int,
    snapshot: Snapshot,
) -> CompanyResponse:
    """Get a single company by ID."""
    company = snapshot.get(company_id)

    if not company:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Company {company_id} not found",
        )

    return CompanyResponse.model_validate(company)


@router.post("/refresh", response_model=RefreshResponse)
async def refresh_catalog(catalog: Catalog) -> RefreshResponse:
    """Reload all companies from the store and rebuild the search index."""
    snapshot = await catalog.refresh()
    return RefreshResponse(total=len(snapshot.companies), built_at=snapshot.built_at)
