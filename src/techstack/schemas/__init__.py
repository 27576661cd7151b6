"""Pydantic schemas for request/response validation."""

from techstack.schemas.ai import (
    FilterSuggestions,
    SuggestRequest,
    SuggestResponse,
    TranslateRequest,
    TranslateResponse,
)
from techstack.schemas.common import ErrorResponse
from techstack.schemas.company import (
    CompanyResponse,
    FilterOptions,
    RefreshResponse,
    SearchResponse,
)
from techstack.schemas.filters import (
    FilterSpec,
    RevenueBound,
    TechnologyCondition,
    TechnologyFilter,
    parse_filter_spec,
)

__all__ = [
    "CompanyResponse",
    "ErrorResponse",
    "FilterOptions",
    "FilterSpec",
    "FilterSuggestions",
    "RefreshResponse",
    "RevenueBound",
    "SearchResponse",
    "SuggestRequest",
    "SuggestResponse",
    "TechnologyCondition",
    "TechnologyFilter",
    "TranslateRequest",
    "TranslateResponse",
    "parse_filter_spec",
]
