"""Immutable company records used by the search engine."""

from dataclasses import dataclass, field, asdict
from functools import cached_property
from typing import Any, Mapping


@dataclass(frozen=True)
class CompanyEntity:
    """One directory company, frozen for the duration of a query cycle.

    ``technologies`` and ``office_locations`` keep their source order for
    display; predicates only ever look at them as sets.
    """

    id: int
    name: str
    domain: str = ""
    industry: str = ""
    category: str = ""
    hq_country: str = ""
    founded: int | None = None
    revenue: int = 0
    employees: int = 0
    technologies: tuple[str, ...] = field(default_factory=tuple)
    office_locations: tuple[str, ...] = field(default_factory=tuple)

    @cached_property
    def technology_set(self) -> frozenset[str]:
        return frozenset(self.technologies)

    @cached_property
    def office_location_set(self) -> frozenset[str]:
        return frozenset(self.office_locations)

    @property
    def tech_count(self) -> int:
        """Number of distinct technologies."""
        return len(self.technology_set)

    @property
    def office_location_count(self) -> int:
        """Number of distinct office locations."""
        return len(self.office_location_set)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CompanyEntity":
        """Build an entity from a plain dict (seed data, JSON payloads)."""
        return cls(
            id=int(data["id"]),
            name=data.get("name") or "",
            domain=data.get("domain") or "",
            industry=data.get("industry") or "",
            category=data.get("category") or "",
            hq_country=data.get("hq_country") or "",
            founded=data.get("founded") or None,
            revenue=int(data.get("revenue") or 0),
            employees=int(data.get("employees") or 0),
            technologies=tuple(data.get("technologies") or ()),
            office_locations=tuple(data.get("office_locations") or ()),
        )

    @classmethod
    def from_record(cls, record: Any) -> "CompanyEntity":
        """Build an entity from a stored ``Company`` row."""
        return cls(
            id=record.id,
            name=record.name,
            domain=record.domain or "",
            industry=record.industry or "",
            category=record.category or "",
            hq_country=record.hq_country or "",
            founded=record.founded or None,
            revenue=record.revenue or 0,
            employees=record.employees or 0,
            technologies=tuple(record.technologies or ()),
            office_locations=tuple(record.office_locations or ()),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with list-valued array fields."""
        data = asdict(self)
        data["technologies"] = list(self.technologies)
        data["office_locations"] = list(self.office_locations)
        return data
