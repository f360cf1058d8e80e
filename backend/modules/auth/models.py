"""
Authentication module data models.
"""

from pydantic import BaseModel, Field


class TokenPayload(BaseModel):
    """Claims carried by a session token."""

    sub: str = Field(..., description="Subject (normalized email)")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")
