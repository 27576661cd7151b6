"""Common schemas used across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body returned by the exception handlers."""

    detail: str
    errors: list[dict[str, Any]] = []
