"""Tests for filter specification parsing."""

import pytest

from techstack.exceptions import InvalidSpecification
from techstack.schemas.filters import (
    DEFAULT_COUNT_RANGE,
    MAX_REVENUE_AMOUNT,
    FilterSpec,
    RevenueBound,
    TechnologyCondition,
    parse_filter_spec,
)


def test_empty_payload_gives_defaults():
    """Missing fields impose no constraint."""
    spec = parse_filter_spec({})
    assert spec.search is None
    assert spec.technologies_and == []
    assert spec.tech_count == DEFAULT_COUNT_RANGE
    assert spec.office_location_count == DEFAULT_COUNT_RANGE
    assert spec.employee_count is None
    assert spec.min_revenue is None
    assert parse_filter_spec(None) == spec


def test_camel_and_snake_keys_are_equivalent():
    camel = parse_filter_spec({"technologiesAnd": ["React"], "techCount": [1, 3]})
    snake = parse_filter_spec({"technologies_and": ["React"], "tech_count": [1, 3]})
    assert camel == snake
    assert camel.tech_count == (1, 3)


def test_serializes_with_camel_case_aliases():
    spec = FilterSpec(technologiesOr=["Go"])
    dumped = spec.model_dump(by_alias=True)
    assert dumped["technologiesOr"] == ["Go"]
    assert "technologies_or" not in dumped


def test_legacy_technology_list_is_folded():
    """Per-item conditions become the three technology sets."""
    spec = parse_filter_spec({
        "technologies": [
            {"value": "React", "condition": "AND"},
            {"value": "Java", "condition": "NOT"},
            {"value": "Go", "condition": "OR"},
            {"value": "Python"},
            {"value": "React", "condition": "AND"},
        ],
    })
    assert spec.technologies_and == ["React", "Python"]
    assert spec.technologies_or == ["Go"]
    assert spec.technologies_not == ["Java"]

    conditions = {f.value: f.condition for f in spec.technology_filters()}
    assert conditions["Java"] is TechnologyCondition.NOT


def test_legacy_technology_with_bad_condition_is_rejected():
    with pytest.raises(InvalidSpecification):
        parse_filter_spec({"technologies": [{"value": "React", "condition": "XOR"}]})


def test_legacy_flat_revenue_is_folded():
    spec = parse_filter_spec({"minRevenue": 100, "minRevenueUnit": "million"})
    assert spec.min_revenue == RevenueBound(value=100, unit="millions")
    assert spec.min_revenue.amount == 100_000_000


def test_flat_revenue_defaults_to_millions():
    spec = parse_filter_spec({"maxRevenue": 2})
    assert spec.max_revenue.amount == 2_000_000


@pytest.mark.parametrize("unit", ["billion", "Billions", " BILLIONS "])
def test_revenue_unit_aliases(unit):
    bound = RevenueBound(value=1.5, unit=unit)
    assert bound.unit == "billions"
    assert bound.amount == 1_500_000_000


@pytest.mark.parametrize(
    "payload",
    [
        {"minRevenue": {"value": 1e305, "unit": "billions"}},
        {
            "minRevenue": {"value": 1e305, "unit": "billions"},
            "maxRevenue": {"value": 1e306, "unit": "billions"},
        },
        {"maxRevenue": 1e300, "maxRevenueUnit": "million"},
        {"maxRevenue": {"value": 2_000_000, "unit": "billions"}},
    ],
)
def test_oversized_revenue_bound_is_rejected(payload):
    """Bounds too large for whole currency units are invalid, not overflowed."""
    with pytest.raises(InvalidSpecification):
        parse_filter_spec(payload)


def test_largest_revenue_bound_is_accepted():
    spec = parse_filter_spec({"maxRevenue": {"value": 1_000_000, "unit": "billions"}})
    assert spec.max_revenue.amount == MAX_REVENUE_AMOUNT


def test_unknown_revenue_unit_is_rejected():
    with pytest.raises(InvalidSpecification):
        parse_filter_spec({"minRevenue": {"value": 1, "unit": "thousands"}})


def test_range_minimum_above_maximum_is_rejected():
    """[5, 2] is not a range."""
    with pytest.raises(InvalidSpecification) as exc_info:
        parse_filter_spec({"techCount": [5, 2]})
    assert exc_info.value.errors
    assert exc_info.value.errors[0]["loc"] == ["techCount"]


def test_negative_count_is_rejected():
    with pytest.raises(InvalidSpecification):
        parse_filter_spec({"employeeCount": [-1, 10]})


def test_revenue_minimum_above_maximum_is_rejected():
    """Bounds compare in currency units, not raw values."""
    with pytest.raises(InvalidSpecification):
        parse_filter_spec({
            "minRevenue": {"value": 2, "unit": "billions"},
            "maxRevenue": {"value": 500, "unit": "millions"},
        })

    spec = parse_filter_spec({
        "minRevenue": {"value": 500, "unit": "millions"},
        "maxRevenue": {"value": 2, "unit": "billions"},
    })
    assert spec.min_revenue.amount < spec.max_revenue.amount


def test_unknown_key_is_rejected():
    with pytest.raises(InvalidSpecification) as exc_info:
        parse_filter_spec({"colour": "blue"})
    assert exc_info.value.errors[0]["type"] == "extra_forbidden"


def test_wrong_type_is_rejected():
    with pytest.raises(InvalidSpecification):
        parse_filter_spec({"industries": "Travel"})


def test_non_object_payload_is_rejected():
    with pytest.raises(InvalidSpecification):
        parse_filter_spec(["React"])


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_blank_search_means_no_search(text):
    spec = parse_filter_spec({"search": text})
    assert spec.search is None
    assert not spec.has_search


def test_search_is_trimmed():
    spec = parse_filter_spec({"search": "  react  "})
    assert spec.search == "react"
    assert spec.has_search
