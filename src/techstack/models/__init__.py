"""Database models."""

from techstack.models.base import Base
from techstack.models.company import Company
from techstack.models.database import async_engine, async_session_maker, init_db, close_db

__all__ = [
    "Base",
    "Company",
    "async_engine",
    "async_session_maker",
    "init_db",
    "close_db",
]
