"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Apps built here use the in-memory store backend.
"""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from modules.auth.tokens import TokenCodec
from shared.config import Settings


# Test session secret (only for testing)
TEST_SESSION_SECRET = "test-secret-key-for-testing-only"


@pytest.fixture
def settings() -> Settings:
    """Settings for a development-mode app with the in-memory store."""
    return Settings(
        _env_file=None,
        session_secret=TEST_SESSION_SECRET,
        store_backend="memory",
        environment="development",
    )


@pytest.fixture
def app(settings: Settings):
    """Create a fresh app for each test."""
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    """HTTP client that keeps cookies between requests."""
    return TestClient(app)


@pytest.fixture
def codec() -> TokenCodec:
    """Codec signing with the test secret."""
    return TokenCodec(TEST_SESSION_SECRET, ttl=timedelta(hours=1))


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "visitor@travling.app"


@pytest.fixture
def auth_token(codec: TokenCodec, test_user_email: str) -> str:
    """Create a valid session token for testing."""
    return codec.issue(test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
