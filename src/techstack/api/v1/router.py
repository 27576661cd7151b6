"""Main API router aggregating all v1 endpoints."""

from fastapi import APIRouter

from techstack.api.v1 import ai, companies, search

api_router = APIRouter()

# Include sub-routers
api_router.include_router(search.router, prefix="/search", tags=["Search"])
api_router.include_router(companies.router, prefix="/companies", tags=["Companies"])
api_router.include_router(ai.router, prefix="/ai", tags=["AI"])
