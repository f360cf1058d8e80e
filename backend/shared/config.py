"""
Centralized configuration for the Travling backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings are namespaced (e.g., SESSION_*, SUPABASE_*).
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Travling Wishlist API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # "production" turns on Secure / SameSite=None session cookies
    environment: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = [
        "https://travling-clint-site.vercel.app",
        "http://localhost:5173",
    ]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Session tokens
    session_secret: str = ""
    session_cookie_name: str = "token"
    session_ttl_hours: int = 24
    jwt_algorithm: str = "HS256"

    # Backing store
    store_backend: Literal["supabase", "memory"] = "supabase"
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    users_table: str = "users"
    wishlist_table: str = "wishlist"

    @property
    def is_production(self) -> bool:
        """Whether the service runs in a production-like context."""
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
