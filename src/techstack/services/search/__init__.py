"""Company search: text index, filter engine and catalog."""

from techstack.services.search.catalog import CatalogSnapshot, CompanyCatalog, load_from_store
from techstack.services.search.entities import CompanyEntity
from techstack.services.search.filter_engine import (
    build_predicates,
    paginate,
    search,
    sort_companies,
)
from techstack.services.search.text_index import TextIndex, tokenize

__all__ = [
    "CatalogSnapshot",
    "CompanyCatalog",
    "CompanyEntity",
    "TextIndex",
    "build_predicates",
    "load_from_store",
    "paginate",
    "search",
    "sort_companies",
    "tokenize",
]
