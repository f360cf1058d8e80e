"""
Shared infrastructure for the Travling backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base Supabase repository

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import create_supabase_client
from .exceptions import (
    TravlingError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    StoreError,
)
from .models import APIModel, AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "create_supabase_client",
    "TravlingError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "StoreError",
    "APIModel",
    "AuthenticatedUser",
]
