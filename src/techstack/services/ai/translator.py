"""Natural-language to filter translation using an OpenAI chat model."""

import json
from typing import Any, Protocol

import structlog
from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from techstack.exceptions import InvalidSpecification, TranslationFailure
from techstack.schemas.ai import FilterSuggestions
from techstack.schemas.company import FilterOptions
from techstack.schemas.filters import FilterSpec, parse_filter_spec
from techstack.services.ai.prompts import (
    NATURAL_LANGUAGE_TO_FILTERS_SYSTEM,
    SUGGEST_FILTERS_SYSTEM,
    natural_language_to_filters_prompt,
    suggest_filters_prompt,
)

logger = structlog.get_logger()

# Keys the model may return for a translation; anything else is dropped
TRANSLATED_KEYS = ("search", "industries", "countries", "officeLocations", "technologies", "techCount")


class FilterTranslatorProtocol(Protocol):
    """Protocol for natural-language filter translators."""

    async def translate(self, query: str, options: FilterOptions) -> FilterSpec:
        """Translate a query into a filter spec."""
        ...

    async def suggest(self, initial_input: str, options: FilterOptions) -> FilterSuggestions:
        """Suggest filter values for an initial input."""
        ...


def _restrict(values: Any, allowed: list[str]) -> list[str]:
    """Keep only known option values, preserving order and dropping repeats."""
    if not isinstance(values, list):
        return []
    allowed_set = set(allowed)
    return list(dict.fromkeys(v for v in values if isinstance(v, str) and v in allowed_set))


def sanitize_translation(raw: dict[str, Any], options: FilterOptions) -> dict[str, Any]:
    """Restrict a raw model translation to recognized keys and available values."""
    data = {key: raw[key] for key in TRANSLATED_KEYS if key in raw}

    data["industries"] = _restrict(data.get("industries"), options.industries)
    data["countries"] = _restrict(data.get("countries"), options.countries)
    data["officeLocations"] = _restrict(data.get("officeLocations"), options.office_locations)

    technologies = data.get("technologies") or []
    allowed_technologies = set(options.technologies)
    data["technologies"] = [
        item for item in technologies
        if isinstance(item, dict) and item.get("value") in allowed_technologies
    ]

    return data


def apply_suggestions(spec: FilterSpec, suggestions: FilterSuggestions) -> FilterSpec:
    """Replace facet filters with suggestions; add new technologies as AND terms."""
    known = set(spec.technologies_and) | set(spec.technologies_or) | set(spec.technologies_not)
    new_technologies = [t for t in suggestions.suggested_technologies if t not in known]

    return spec.model_copy(
        update={
            "industries": list(suggestions.suggested_industries),
            "countries": list(suggestions.suggested_countries),
            "office_locations": list(suggestions.suggested_office_locations),
            "technologies_and": [*spec.technologies_and, *new_technologies],
        }
    )


class FilterTranslator:
    """
    Turn free-form queries into filter specs with a chat model.

    The model is asked for a JSON object, which is then restricted to the
    available options and validated as a FilterSpec. Every failure
    (network, API, malformed output) surfaces as TranslationFailure.

    Usage:
        translator = FilterTranslator(api_key="sk-...")
        spec = await translator.translate("fintech in the UK using Java", options)
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4o-mini",
        temperature: float = 0.0,
        max_tokens: int = 1000,
        timeout: float = 30.0,
        base_url: str | None = None,
        client: Any = None,
    ):
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._client = client or AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.close()

    async def _complete_json(self, system: str, user: str) -> dict[str, Any]:
        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except OpenAIError as e:
            logger.error("Chat completion failed", model=self.model, error=str(e))
            raise TranslationFailure(f"Model request failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise TranslationFailure("Model returned an empty response")

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning("Model returned invalid JSON", model=self.model, error=str(e))
            raise TranslationFailure("Model returned invalid JSON") from e

        if not isinstance(data, dict):
            raise TranslationFailure("Model returned a non-object JSON value")

        return data

    async def translate(self, query: str, options: FilterOptions) -> FilterSpec:
        """Translate a natural-language query into a filter spec."""
        raw = await self._complete_json(
            NATURAL_LANGUAGE_TO_FILTERS_SYSTEM,
            natural_language_to_filters_prompt(query, options),
        )

        try:
            spec = parse_filter_spec(sanitize_translation(raw, options))
        except InvalidSpecification as e:
            logger.warning("Model output is not a valid filter", query=query, errors=e.errors)
            raise TranslationFailure("Model output is not a valid filter specification") from e

        logger.info(
            "Translated query to filters",
            query=query,
            technologies=len(spec.technology_filters()),
            has_search=spec.has_search,
        )
        return spec

    async def suggest(self, initial_input: str, options: FilterOptions) -> FilterSuggestions:
        """Suggest technologies, countries, industries and office locations."""
        raw = await self._complete_json(
            SUGGEST_FILTERS_SYSTEM,
            suggest_filters_prompt(initial_input, options),
        )

        try:
            suggestions = FilterSuggestions.model_validate(raw)
        except ValidationError as e:
            raise TranslationFailure("Model output is not a valid suggestion list") from e

        return FilterSuggestions(
            suggested_technologies=_restrict(suggestions.suggested_technologies, options.technologies),
            suggested_countries=_restrict(suggestions.suggested_countries, options.countries),
            suggested_industries=_restrict(suggestions.suggested_industries, options.industries),
            suggested_office_locations=_restrict(
                suggestions.suggested_office_locations, options.office_locations
            ),
        )
