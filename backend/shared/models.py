"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """
    Base for models exchanged over HTTP.

    Fields are snake_case in Python and camelCase on the wire,
    matching what the front end sends and expects.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated visitor.

    Populated from the verified session token and made available
    to route handlers via dependency injection. Only the subject
    email is trusted for authorization decisions.
    """

    email: str = Field(..., description="Normalized email from the token subject")

    model_config = {
        "frozen": True,  # Make immutable for safety
    }
