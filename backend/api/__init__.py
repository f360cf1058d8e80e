"""
Travling API package.

Provides the FastAPI application for the Travling wishlist service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
