"""API dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from techstack.config import settings
from techstack.services.ai.translator import FilterTranslator, FilterTranslatorProtocol
from techstack.services.search.catalog import CatalogSnapshot, CompanyCatalog


def get_catalog(request: Request) -> CompanyCatalog:
    """Get the application's company catalog."""
    return request.app.state.catalog


async def get_snapshot(
    catalog: CompanyCatalog = Depends(get_catalog),
) -> CatalogSnapshot:
    """Get the current catalog snapshot, loading it on first use.

    The snapshot is held for the whole request, so a concurrent refresh
    never changes the collection mid-query.
    """
    return await catalog.snapshot()


def get_translator(request: Request) -> FilterTranslatorProtocol:
    """Get the shared filter translator, creating it on first use."""
    translator = getattr(request.app.state, "translator", None)
    if translator is not None:
        return translator

    if not settings.ai_enabled:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="OpenAI API key not configured",
        )

    translator = FilterTranslator(
        api_key=settings.openai_api_key.get_secret_value(),
        model=settings.ai_default_model,
        temperature=settings.ai_temperature,
        max_tokens=settings.ai_max_tokens,
        timeout=settings.ai_timeout,
        base_url=settings.openai_base_url,
    )
    request.app.state.translator = translator
    return translator


# Type aliases for cleaner dependency injection
Catalog = Annotated[CompanyCatalog, Depends(get_catalog)]
Snapshot = Annotated[CatalogSnapshot, Depends(get_snapshot)]
Translator = Annotated[FilterTranslatorProtocol, Depends(get_translator)]
