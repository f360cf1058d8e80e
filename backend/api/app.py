"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from modules.users.routes import router as users_router
from modules.wishlist.routes import router as wishlist_router

from .dependencies import ServiceContainer
from .middleware.errors import register_error_handlers
from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Opens the store client at startup and releases it at shutdown.
    """
    settings: Settings = app.state.settings
    container: ServiceContainer = app.state.container

    await container.connect()
    logger.info(
        "Starting %s on %s:%s (environment=%s, store=%s)",
        settings.app_name, settings.host, settings.port,
        settings.environment, settings.store_backend,
    )
    yield
    await container.close()
    logger.info("Shutting down %s", settings.app_name)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; defaults to the environment-loaded settings

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Session authentication and per-visitor hotel wishlists",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.container = ServiceContainer(settings)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_error_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(users_router, tags=["users"])
    app.include_router(wishlist_router, tags=["wishlist"])

    return app


# Application instance for uvicorn
app = create_app()
