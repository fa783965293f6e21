"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error response.

    For ``VALIDATION_ERROR`` raised by profile rules, ``details`` maps each
    failing field to its message.
    """

    error_code: str
    message: str
    details: Any | None = None
