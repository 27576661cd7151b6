"""Data access repositories."""

from techstack.repositories.company_repo import CompanyRepository

__all__ = ["CompanyRepository"]
