"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. The container is built by create_app() and stored on
app.state; the Supabase client it hands to repositories is opened and
released by the application lifespan.
"""

from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from fastapi import Depends, Request

from shared.config import Settings
from shared.database import create_supabase_client

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import AsyncClient
    from modules.auth.interfaces import IAuthService
    from modules.auth.tokens import TokenCodec
    from modules.auth.transport import SessionTransport
    from modules.users.interfaces import IUserDirectory, IUserRepository
    from modules.wishlist.interfaces import IWishlistRepository, IWishlistService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached for the
    lifetime of the application. Store-backed services need connect()
    to have run when the Supabase backend is configured.
    """

    def __init__(self, settings: Settings, db: "Optional[AsyncClient]" = None) -> None:
        self._settings = settings
        self._db = db
        self._token_codec: "TokenCodec | None" = None
        self._transport: "SessionTransport | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_repository: "IUserRepository | None" = None
        self._user_directory: "IUserDirectory | None" = None
        self._wishlist_repository: "IWishlistRepository | None" = None
        self._wishlist_service: "IWishlistService | None" = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def store_ready(self) -> bool:
        """Whether store-backed services can be used."""
        return self._settings.store_backend == "memory" or self._db is not None

    async def connect(self) -> None:
        """Open the Supabase client if that backend is configured."""
        if self._settings.store_backend == "supabase" and self._db is None:
            self._db = await create_supabase_client(self._settings)

    async def close(self) -> None:
        """Close the store client and drop every service built on it."""
        if self._db is not None:
            await self._db.postgrest.aclose()
        self._db = None
        self.reset()

    def _require_db(self) -> "AsyncClient":
        if self._db is None:
            raise RuntimeError("Store client is not connected; was the app lifespan started?")
        return self._db

    @property
    def token_codec(self) -> "TokenCodec":
        """Get the session token codec."""
        if self._token_codec is None:
            from modules.auth.tokens import TokenCodec
            self._token_codec = TokenCodec(
                secret=self._settings.session_secret,
                ttl=timedelta(hours=self._settings.session_ttl_hours),
                algorithm=self._settings.jwt_algorithm,
            )
        return self._token_codec

    @property
    def transport(self) -> "SessionTransport":
        """Get the session cookie/header transport."""
        if self._transport is None:
            from modules.auth.transport import SessionTransport
            self._transport = SessionTransport(
                cookie_name=self._settings.session_cookie_name,
                secure=self._settings.is_production,
                max_age=self._settings.session_ttl_hours * 3600,
            )
        return self._transport

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(self.token_codec, self.transport)
        return self._auth_service

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the user repository for the configured backend."""
        if self._user_repository is None:
            from modules.users.repository import InMemoryUserRepository, SupabaseUserRepository
            if self._settings.store_backend == "memory":
                self._user_repository = InMemoryUserRepository()
            else:
                self._user_repository = SupabaseUserRepository(
                    self._require_db(), self._settings.users_table
                )
        return self._user_repository

    @property
    def users(self) -> "IUserDirectory":
        """Get the user directory instance."""
        if self._user_directory is None:
            from modules.users.service import UserDirectory
            self._user_directory = UserDirectory(self.user_repository)
        return self._user_directory

    @property
    def wishlist_repository(self) -> "IWishlistRepository":
        """Get the wishlist repository for the configured backend."""
        if self._wishlist_repository is None:
            from modules.wishlist.repository import (
                InMemoryWishlistRepository,
                SupabaseWishlistRepository,
            )
            if self._settings.store_backend == "memory":
                self._wishlist_repository = InMemoryWishlistRepository()
            else:
                self._wishlist_repository = SupabaseWishlistRepository(
                    self._require_db(), self._settings.wishlist_table
                )
        return self._wishlist_repository

    @property
    def wishlist(self) -> "IWishlistService":
        """Get the wishlist service instance."""
        if self._wishlist_service is None:
            from modules.wishlist.service import WishlistService
            self._wishlist_service = WishlistService(self.wishlist_repository)
        return self._wishlist_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._token_codec = None
        self._transport = None
        self._auth_service = None
        self._user_repository = None
        self._user_directory = None
        self._wishlist_repository = None
        self._wishlist_service = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's service container."""
    return request.app.state.container


def get_auth_service(container: ServiceContainer = Depends(get_container)) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return container.auth


def get_user_directory(container: ServiceContainer = Depends(get_container)) -> "IUserDirectory":
    """FastAPI dependency for the user directory."""
    return container.users


def get_wishlist_service(container: ServiceContainer = Depends(get_container)) -> "IWishlistService":
    """FastAPI dependency for wishlist service."""
    return container.wishlist
