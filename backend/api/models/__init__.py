"""API models package."""

from .errors import ErrorResponse, error_responses

__all__ = [
    "ErrorResponse",
    "error_responses",
]
