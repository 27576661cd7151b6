"""Schemas for natural-language filter translation and suggestions."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from techstack.schemas.filters import FilterSpec


class TranslateRequest(BaseModel):
    """Natural-language query to turn into filters."""

    query: str = Field(
        ...,
        min_length=1,
        max_length=1000,
        json_schema_extra={"example": "React companies in the USA, not using Java"},
    )


class TranslateResponse(BaseModel):
    """Filters produced from a natural-language query."""

    query: str
    filters: FilterSpec


class FilterSuggestions(BaseModel):
    """Filter values suggested by the model."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    suggested_technologies: list[str] = []
    suggested_countries: list[str] = []
    suggested_industries: list[str] = []
    suggested_office_locations: list[str] = []


class SuggestRequest(BaseModel):
    """Initial input plus the filters currently applied."""

    initial_input: str = Field(..., min_length=1, max_length=500)
    filters: FilterSpec | None = None


class SuggestResponse(BaseModel):
    """Suggestions and the current filters with suggestions applied."""

    suggestions: FilterSuggestions
    filters: FilterSpec
