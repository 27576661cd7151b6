"""Domain exceptions."""

from typing import Any


class TechstackError(Exception):
    """Base class for all techstack errors."""


class InvalidSpecification(TechstackError):
    """A filter specification failed shape or type validation."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class TranslationFailure(TechstackError):
    """The natural-language translator could not produce filters."""


class CatalogUnavailable(TechstackError):
    """The company store could not be read."""


class SeedIncomplete(TechstackError):
    """A seeding run stopped before every company was written."""
