"""
Users module data models.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from shared.models import APIModel


class User(APIModel):
    """A visitor's stored profile, keyed by normalized email."""

    email: str = Field(..., description="Normalized (case-folded) email")
    profile: dict[str, Any] = Field(default_factory=dict, description="Opaque profile fields")
    created_at: datetime = Field(..., description="First upsert time, never changed")
    updated_at: datetime = Field(..., description="Most recent upsert time")


class UpsertResult(BaseModel):
    """Outcome of a profile upsert."""

    created: bool
    user: User


class UserProfileRequest(BaseModel):
    """
    Body of POST /users.

    Everything except ``email`` is kept as opaque profile data.
    """

    model_config = ConfigDict(extra="allow")

    email: Optional[str] = None

    @property
    def profile(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class LoginRequest(BaseModel):
    """Body of POST /jwt."""

    email: Optional[str] = None


class UpsertResponse(APIModel):
    created: bool


class SessionResponse(APIModel):
    success: bool = True
