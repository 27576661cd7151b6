"""Sample data and store seeding."""

from techstack.data.companies import SEED_COMPANIES
from techstack.data.seed import seed_database

__all__ = ["SEED_COMPANIES", "seed_database"]
