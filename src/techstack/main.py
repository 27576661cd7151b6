"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from techstack.config import settings
from techstack.api.legacy import router as legacy_router
from techstack.api.v1.router import api_router
from techstack.exceptions import CatalogUnavailable, InvalidSpecification, TranslationFailure
from techstack.models.database import init_db, close_db
from techstack.schemas.common import ErrorResponse
from techstack.services.search.catalog import CompanyCatalog, load_from_store

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer() if settings.is_production else structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Techstack Explorer API", version=settings.app_version, environment=settings.environment)
    await init_db()
    try:
        await app.state.catalog.refresh()
    except CatalogUnavailable as e:
        logger.warning("Catalog warm-up failed, will retry on first request", error=str(e))
    yield
    # Shutdown
    logger.info("Shutting down Techstack Explorer API")
    translator = getattr(app.state, "translator", None)
    if translator is not None:
        await translator.close()
    await close_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Company directory search - faceted filters, fuzzy text search and natural-language filters",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json" if settings.debug else None,
        docs_url=f"{settings.api_v1_prefix}/docs" if settings.debug else None,
        redoc_url=f"{settings.api_v1_prefix}/redoc" if settings.debug else None,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    app.state.catalog = CompanyCatalog(
        loader=load_from_store,
        ttl_seconds=settings.catalog_ttl_seconds,
        retry_after_seconds=settings.catalog_retry_seconds,
        index_options={
            "prefix": settings.search_prefix,
            "fuzzy": settings.search_fuzzy_ratio,
            "max_fuzzy": settings.search_max_fuzzy_distance,
        },
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Include API routers
    app.include_router(api_router, prefix=settings.api_v1_prefix)
    app.include_router(legacy_router)

    # Health check endpoint (outside of versioned API)
    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint."""
        snapshot = app.state.catalog.current
        return {
            "status": "healthy",
            "version": settings.app_version,
            "environment": settings.environment,
            "catalog_loaded": snapshot is not None,
            "companies": len(snapshot.companies) if snapshot else 0,
        }

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root() -> dict:
        """Root endpoint with API info."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": f"{settings.api_v1_prefix}/docs" if settings.debug else None,
            "health": "/health",
        }

    @app.exception_handler(InvalidSpecification)
    async def invalid_specification_handler(request: Request, exc: InvalidSpecification) -> ORJSONResponse:
        """Reject malformed filter specifications as client errors."""
        return ORJSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=ErrorResponse(detail=str(exc), errors=exc.errors).model_dump(),
        )

    @app.exception_handler(TranslationFailure)
    async def translation_failure_handler(request: Request, exc: TranslationFailure) -> ORJSONResponse:
        """Report translator failures as recoverable upstream errors."""
        logger.warning("Filter translation failed", path=request.url.path, error=str(exc))
        return ORJSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Could not translate the query into filters", "error": str(exc)},
        )

    @app.exception_handler(CatalogUnavailable)
    async def catalog_unavailable_handler(request: Request, exc: CatalogUnavailable) -> ORJSONResponse:
        """Company store is unreachable and no snapshot is loaded."""
        return ORJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Company data is currently unavailable"},
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
        """Handle uncaught exceptions."""
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=exc,
        )
        return ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error",
                "error": str(exc) if settings.debug else "An unexpected error occurred",
            },
        )

    return app


# Create app instance
app = create_app()


def run() -> None:
    """Run the application with uvicorn (for development)."""
    import uvicorn

    uvicorn.run(
        "techstack.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    run()
