"""Filter specification schemas."""

import enum
import math
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from techstack.exceptions import InvalidSpecification

RevenueUnit = Literal["millions", "billions"]

REVENUE_MULTIPLIERS: dict[str, int] = {
    "millions": 1_000_000,
    "billions": 1_000_000_000,
}

# Upper limit for a revenue bound in whole currency units
MAX_REVENUE_AMOUNT = 10**15

DEFAULT_COUNT_RANGE: tuple[int, int] = (0, 50)

CountRange = tuple[NonNegativeInt, NonNegativeInt]


class TechnologyCondition(str, enum.Enum):
    """Boolean role of a technology in a filter."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"


class TechnologyFilter(BaseModel):
    """A single technology with its condition (legacy and translator shape)."""

    value: str = Field(..., min_length=1)
    condition: TechnologyCondition = TechnologyCondition.AND


class RevenueBound(BaseModel):
    """Revenue bound expressed in millions or billions."""

    model_config = ConfigDict(extra="forbid")

    value: float = Field(..., ge=0, allow_inf_nan=False)
    unit: RevenueUnit = "millions"

    @field_validator("unit", mode="before")
    @classmethod
    def normalize_unit(cls, v: Any) -> Any:
        """Accept singular and mixed-case units ("million", "Billion")."""
        if isinstance(v, str):
            v = v.strip().lower()
            if v in ("million", "billion"):
                return f"{v}s"
        return v

    @model_validator(mode="after")
    def validate_amount(self) -> "RevenueBound":
        total = self.value * REVENUE_MULTIPLIERS[self.unit]
        if not math.isfinite(total) or total > MAX_REVENUE_AMOUNT:
            raise ValueError(f"revenue bound must not exceed {MAX_REVENUE_AMOUNT} in currency units")
        return self

    @property
    def amount(self) -> int:
        """Bound in whole currency units."""
        return round(self.value * REVENUE_MULTIPLIERS[self.unit])


class FilterSpec(BaseModel):
    """
    Structured company filter.

    Wire keys are camelCase (``technologiesAnd``, ``techCount``...); snake_case
    names are accepted too. Empty lists and default ranges impose no
    constraint beyond the range itself.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    search: str | None = Field(None, description="Free-text query over the text index")
    industries: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    countries: list[str] = Field(default_factory=list)
    office_locations: list[str] = Field(default_factory=list)
    technologies_and: list[str] = Field(default_factory=list)
    technologies_or: list[str] = Field(default_factory=list)
    technologies_not: list[str] = Field(default_factory=list)
    tech_count: CountRange = DEFAULT_COUNT_RANGE
    office_location_count: CountRange = DEFAULT_COUNT_RANGE
    employee_count: CountRange | None = None
    min_revenue: RevenueBound | None = None
    max_revenue: RevenueBound | None = None
    founded_year: NonNegativeInt | None = Field(None, description="0 means unset")

    @model_validator(mode="before")
    @classmethod
    def translate_legacy_shapes(cls, data: Any) -> Any:
        """Fold older request shapes into the canonical one.

        - ``technologies: [{value, condition}]`` becomes the three
          technology sets
        - ``minRevenue: 100, minRevenueUnit: "million"`` becomes
          ``minRevenue: {value: 100, unit: "millions"}``
        """
        if not isinstance(data, dict):
            return data

        data = dict(data)

        technologies = data.pop("technologies", None)
        if technologies is not None:
            if not isinstance(technologies, list):
                raise ValueError("technologies must be a list of {value, condition} objects")
            for item in technologies:
                try:
                    tech = TechnologyFilter.model_validate(item)
                except ValidationError as e:
                    raise ValueError(f"invalid technology filter: {e.errors()[0]['msg']}") from e
                key = f"technologies{tech.condition.value.capitalize()}"
                bucket = list(data.get(key) or [])
                if tech.value not in bucket:
                    bucket.append(tech.value)
                data[key] = bucket

        for bound in ("minRevenue", "maxRevenue"):
            unit = data.pop(f"{bound}Unit", None)
            value = data.get(bound)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                data[bound] = {"value": value, "unit": unit or "millions"}

        return data

    @field_validator("search", mode="before")
    @classmethod
    def strip_search(cls, v: Any) -> Any:
        """Blank queries mean no text filtering."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("tech_count", "office_location_count", "employee_count")
    @classmethod
    def validate_range(cls, v: tuple[int, int] | None) -> tuple[int, int] | None:
        """Ranges are [min, max] with min <= max."""
        if v is not None and v[0] > v[1]:
            raise ValueError("range minimum must not exceed maximum")
        return v

    @model_validator(mode="after")
    def validate_revenue_bounds(self) -> "FilterSpec":
        if (
            self.min_revenue is not None
            and self.max_revenue is not None
            and self.min_revenue.amount > self.max_revenue.amount
        ):
            raise ValueError("minRevenue must not exceed maxRevenue")
        return self

    @property
    def has_search(self) -> bool:
        return bool(self.search)

    def technology_filters(self) -> list[TechnologyFilter]:
        """Per-item view of the three technology sets."""
        return (
            [TechnologyFilter(value=t, condition=TechnologyCondition.AND) for t in self.technologies_and]
            + [TechnologyFilter(value=t, condition=TechnologyCondition.OR) for t in self.technologies_or]
            + [TechnologyFilter(value=t, condition=TechnologyCondition.NOT) for t in self.technologies_not]
        )


def parse_filter_spec(payload: Any) -> FilterSpec:
    """Validate a raw payload, raising InvalidSpecification on bad shape."""
    if payload is None:
        payload = {}
    try:
        return FilterSpec.model_validate(payload)
    except ValidationError as e:
        errors = [
            {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in e.errors()
        ]
        raise InvalidSpecification("Invalid filter specification", errors=errors) from e
