"""CSV and JSON export of search results."""

import csv
import io
import json
from typing import Iterable, Iterator

from techstack.services.search.entities import CompanyEntity

CSV_COLUMNS = [
    "name",
    "domain",
    "industry",
    "category",
    "hq_country",
    "founded",
    "revenue_usd",
    "employees",
    "tech_count",
    "technologies",
    "office_locations",
]

LIST_SEPARATOR = "; "


def _csv_row(company: CompanyEntity) -> dict:
    return {
        "name": company.name,
        "domain": company.domain,
        "industry": company.industry,
        "category": company.category,
        "hq_country": company.hq_country,
        "founded": company.founded or "",
        "revenue_usd": company.revenue,
        "employees": company.employees,
        "tech_count": company.tech_count,
        "technologies": LIST_SEPARATOR.join(company.technologies),
        "office_locations": LIST_SEPARATOR.join(company.office_locations),
    }


def iter_csv(companies: Iterable[CompanyEntity]) -> Iterator[str]:
    """Yield CSV text chunk by chunk: the header, then one row per company.

    Fields containing a comma, quote or newline are quoted, quotes doubled.
    """
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=CSV_COLUMNS, lineterminator="\n")
    writer.writeheader()
    yield output.getvalue()
    output.seek(0)
    output.truncate(0)

    for company in companies:
        writer.writerow(_csv_row(company))
        yield output.getvalue()
        output.seek(0)
        output.truncate(0)


def to_csv(companies: Iterable[CompanyEntity]) -> str:
    """Serialize companies to a CSV document."""
    return "".join(iter_csv(companies))


def to_json(companies: Iterable[CompanyEntity]) -> str:
    """Serialize companies to pretty-printed JSON."""
    return json.dumps([company.to_dict() for company in companies], indent=2, ensure_ascii=False)
