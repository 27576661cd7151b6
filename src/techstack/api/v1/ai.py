"""Natural-language filter endpoints."""

from fastapi import APIRouter

from techstack.api.deps import Snapshot, Translator
from techstack.schemas.ai import (
    SuggestRequest,
    SuggestResponse,
    TranslateRequest,
    TranslateResponse,
)
from techstack.schemas.filters import FilterSpec
from techstack.services.ai.translator import apply_suggestions

router = APIRouter()


@router.post("/filters", response_model=TranslateResponse)
async def translate_query(
    data: TranslateRequest,
    snapshot: Snapshot,
    translator: Translator,
) -> TranslateResponse:
    """
    Translate a natural-language query into structured filters.

    The returned filters can be posted unchanged to the search endpoint.
    On failure (502) the client should keep its current filters.
    """
    filters = await translator.translate(data.query, snapshot.options)
    return TranslateResponse(query=data.query, filters=filters)


@router.post("/suggestions", response_model=SuggestResponse)
async def suggest_filters(
    data: SuggestRequest,
    snapshot: Snapshot,
    translator: Translator,
) -> SuggestResponse:
    """Suggest technologies, countries, industries and office locations."""
    suggestions = await translator.suggest(data.initial_input, snapshot.options)
    filters = apply_suggestions(data.filters or FilterSpec(), suggestions)
    return SuggestResponse(suggestions=suggestions, filters=filters)
