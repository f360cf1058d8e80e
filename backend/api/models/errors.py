"""
Error response models.

Standardized error responses for the API, matching TravlingError.to_dict().
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


def error_responses(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    """OpenAPI ``responses`` entries documenting error bodies."""
    return {code: {"model": ErrorResponse} for code in status_codes}
