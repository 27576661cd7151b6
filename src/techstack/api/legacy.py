"""Unversioned search route answering with a bare JSON array."""

from typing import Any

from fastapi import APIRouter, Body

from techstack.api.deps import Snapshot
from techstack.api.v1.search import run_search
from techstack.schemas.common import ErrorResponse
from techstack.schemas.company import CompanyResponse
from techstack.schemas.filters import parse_filter_spec

router = APIRouter()


@router.post(
    "/api/search",
    response_model=list[CompanyResponse],
    responses={422: {"model": ErrorResponse}},
    tags=["Legacy"],
)
async def legacy_search(
    snapshot: Snapshot,
    payload: dict[str, Any] | None = Body(None),
) -> list[CompanyResponse]:
    """Search for clients that expect a bare array and older filter shapes."""
    filters = parse_filter_spec(payload)
    results = run_search(snapshot, filters)
    return [CompanyResponse.model_validate(company) for company in results]
