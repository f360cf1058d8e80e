"""
End-to-end API scenarios against the in-memory store.

Each test drives the FastAPI app through TestClient, which keeps the
session cookie between requests like a browser would.
"""

import logging
import uuid
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_wishlist_service
from shared.config import Settings
from shared.exceptions import StoreError


def register(client: TestClient, email: str, **profile) -> dict:
    response = client.post("/users", json={"email": email, **profile})
    assert response.status_code == 200
    return response.json()


class TestRegistration:
    def test_create_then_update(self, client):
        assert register(client, "alice@x.com", name="Alice") == {"created": True}
        assert register(client, "ALICE@x.com ", name="Alice B") == {"created": False}

        profile = client.get("/users/me").json()
        assert profile["email"] == "alice@x.com"
        assert profile["profile"] == {"name": "Alice B"}

    def test_sets_session_cookie(self, client):
        response = client.post("/users", json={"email": "alice@x.com"})

        cookie = response.headers["set-cookie"]
        assert cookie.startswith("token=")
        assert "HttpOnly" in cookie
        assert "Path=/" in cookie
        assert "samesite=lax" in cookie.lower()
        assert "Secure" not in cookie
        assert "Max-Age=86400" in cookie

    def test_missing_email(self, client):
        response = client.post("/users", json={"name": "Alice"})
        assert response.status_code == 400
        assert response.json()["error"] == "EMAIL_REQUIRED"
        assert "set-cookie" not in response.headers

    def test_invalid_email(self, client):
        response = client.post("/users", json={"email": "not-an-email"})
        assert response.status_code == 400
        assert response.json()["error"] == "EMAIL_INVALID"

    def test_non_object_body(self, client):
        response = client.post("/users", json=["alice@x.com"])
        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"


class TestSessionIssue:
    def test_unknown_email(self, client):
        response = client.post("/jwt", json={"email": "ghost@x.com"})
        assert response.status_code == 404
        assert "set-cookie" not in response.headers

    def test_known_email(self, app):
        first = TestClient(app)
        register(first, "alice@x.com")

        second = TestClient(app)
        response = second.post("/jwt", json={"email": " Alice@X.com"})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert second.get("/wishlist").status_code == 200

    def test_missing_email(self, client):
        assert client.post("/jwt", json={}).status_code == 400


class TestLogout:
    def test_logout_clears_cookie(self, client):
        register(client, "alice@x.com")
        assert client.get("/wishlist").status_code == 200

        response = client.post("/logout")

        assert response.status_code == 200
        cookie = response.headers["set-cookie"]
        assert cookie.startswith("token=")
        assert "Max-Age=0" in cookie
        assert "HttpOnly" in cookie
        assert client.get("/wishlist").status_code == 401

    def test_logout_without_session(self, client):
        assert client.post("/logout").status_code == 200


class TestCredentials:
    def test_no_credential(self, client):
        response = client.get("/wishlist")
        assert response.status_code == 401
        assert response.json()["error"] == "UNAUTHENTICATED"

    def test_bearer_header(self, client, auth_headers):
        response = client.get("/wishlist", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == []

    def test_bearer_scheme_case_insensitive(self, client, auth_token):
        response = client.get("/wishlist", headers={"Authorization": f"bearer {auth_token}"})
        assert response.status_code == 200

    def test_tampered_token(self, client, auth_token):
        header, payload, signature = auth_token.split(".")
        flipped = "A" if signature[10] != "A" else "B"
        tampered = ".".join([header, payload, signature[:10] + flipped + signature[11:]])

        response = client.get("/wishlist", headers={"Authorization": f"Bearer {tampered}"})

        assert response.status_code == 403
        assert response.json()["error"] == "INVALID_CREDENTIAL"

    def test_expired_token(self, client, codec):
        token = codec.issue("visitor@travling.app", ttl=timedelta(seconds=-10))
        response = client.get("/wishlist", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403

    def test_garbage_token(self, client):
        response = client.get("/wishlist", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 403

    def test_token_from_other_secret(self, client):
        from modules.auth.tokens import TokenCodec

        foreign = TokenCodec("another-secret", ttl=timedelta(hours=1)).issue("visitor@travling.app")
        response = client.get("/wishlist", headers={"Authorization": f"Bearer {foreign}"})
        assert response.status_code == 403

    def test_me_without_profile(self, client, auth_headers):
        # Valid session whose subject never registered
        assert client.get("/users/me", headers=auth_headers).status_code == 404


class TestWishlistLifecycle:
    def test_save_duplicate_list_delete(self, client):
        register(client, "alice@x.com")

        created = client.post("/wishlist", json={"externalItemId": "h1", "title": "Sea View"})
        assert created.status_code == 201
        internal_id = created.json()["internalId"]

        duplicate = client.post("/wishlist", json={"externalItemId": "h1"})
        assert duplicate.status_code == 409
        assert duplicate.json()["error"] == "ALREADY_SAVED"

        items = client.get("/wishlist").json()
        assert len(items) == 1
        assert items[0]["internalId"] == internal_id
        assert items[0]["externalItemId"] == "h1"
        assert items[0]["ownerEmail"] == "alice@x.com"
        assert items[0]["payload"] == {"title": "Sea View"}
        assert items[0]["kind"] == "item"

        deleted = client.delete(f"/wishlist/{internal_id}")
        assert deleted.status_code == 200
        assert deleted.json() == {"deleted": True}

        assert client.get("/wishlist").json() == []

    def test_id_alias_and_numeric_id(self, client):
        register(client, "alice@x.com")
        assert client.post("/wishlist", json={"id": 42}).status_code == 201
        assert client.post("/wishlist", json={"externalItemId": "42"}).status_code == 409

    def test_missing_external_id(self, client):
        register(client, "alice@x.com")
        response = client.post("/wishlist", json={"title": "Sea View"})
        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_WISHLIST_DATA"

    def test_body_cannot_claim_owner(self, app):
        alice = TestClient(app)
        register(alice, "alice@x.com")
        alice.post("/wishlist", json={"id": "h1", "ownerEmail": "bob@x.com", "email": "bob@x.com"})

        bob = TestClient(app)
        register(bob, "bob@x.com")

        assert bob.get("/wishlist").json() == []
        items = alice.get("/wishlist").json()
        assert items[0]["ownerEmail"] == "alice@x.com"
        assert items[0]["payload"] == {}

    def test_invalid_item_id(self, client):
        register(client, "alice@x.com")
        response = client.delete("/wishlist/not-a-uuid")
        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_ITEM_ID"

    def test_delete_requires_session(self, client):
        assert client.delete(f"/wishlist/{uuid.uuid4()}").status_code == 401


class TestRecommendations:
    def test_save_then_repeat(self, client):
        register(client, "alice@x.com")
        body = {"hotelId": "hotel-9", "name": "Grand", "stars": 5}

        first = client.post("/wishlist-recommend", json=body)
        assert first.status_code == 201
        assert first.json()["alreadyPresent"] is False
        assert "internalId" in first.json()

        second = client.post("/wishlist-recommend", json=body)
        assert second.status_code == 200
        assert second.json() == {"alreadyPresent": True, "message": "Already in wishlist"}

        items = client.get("/wishlist").json()
        assert len(items) == 1
        assert items[0]["kind"] == "recommendation"
        assert items[0]["hotelId"] == "hotel-9"
        assert items[0]["name"] == "Grand"
        assert items[0]["payload"] == {"stars": 5}

    def test_missing_name(self, client):
        register(client, "alice@x.com")
        response = client.post("/wishlist-recommend", json={"hotelId": "hotel-9"})
        assert response.status_code == 400

    def test_requires_session(self, client):
        response = client.post("/wishlist-recommend", json={"hotelId": "h", "name": "n"})
        assert response.status_code == 401


class TestIsolation:
    def test_owners_see_only_their_items(self, app):
        alice = TestClient(app)
        bob = TestClient(app)
        register(alice, "alice@x.com")
        register(bob, "bob@x.com")

        alice.post("/wishlist", json={"id": "a1"})
        bob.post("/wishlist", json={"id": "b1"})
        alice.post("/wishlist-recommend", json={"hotelId": "a2", "name": "Grand"})

        alice_items = alice.get("/wishlist").json()
        assert [i.get("externalItemId") or i.get("hotelId") for i in alice_items] == ["a1", "a2"]
        assert [i["externalItemId"] for i in bob.get("/wishlist").json()] == ["b1"]

    def test_cannot_delete_other_owners_item(self, app):
        alice = TestClient(app)
        bob = TestClient(app)
        register(alice, "alice@x.com")
        register(bob, "bob@x.com")

        internal_id = bob.post("/wishlist", json={"id": "b1"}).json()["internalId"]

        response = alice.delete(f"/wishlist/{internal_id}")
        missing = alice.delete(f"/wishlist/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"] == missing.json()["error"]
        assert len(bob.get("/wishlist").json()) == 1


class TestStoreFailure:
    def test_store_error_is_opaque(self, app, client, auth_headers):
        service = MagicMock()
        service.list_items = AsyncMock(
            side_effect=StoreError(
                "Store operation failed: list_items",
                operation="list_items",
                details={"table": "wishlist", "store_code": "XX000"},
            )
        )
        app.dependency_overrides[get_wishlist_service] = lambda: service

        response = client.get("/wishlist", headers=auth_headers)

        assert response.status_code == 500
        body = response.json()
        assert body == {"error": "STORE_ERROR", "message": "Internal server error", "details": {}}
        assert "wishlist" not in response.text

    def test_store_error_not_logged_again_as_error(self, app, client, auth_headers, caplog):
        service = MagicMock()
        service.list_items = AsyncMock(
            side_effect=StoreError("Store operation failed: list_items", operation="list_items")
        )
        app.dependency_overrides[get_wishlist_service] = lambda: service

        with caplog.at_level(logging.DEBUG, logger="api.middleware.errors"):
            response = client.get("/wishlist", headers=auth_headers)

        assert response.status_code == 500
        handler_records = [r for r in caplog.records if r.name == "api.middleware.errors"]
        assert handler_records
        assert all(r.levelno < logging.ERROR for r in handler_records)


class TestProductionCookies:
    @pytest.fixture
    def settings(self) -> Settings:
        return Settings(
            _env_file=None,
            session_secret="test-secret-key-for-testing-only",
            store_backend="memory",
            environment="production",
        )

    def test_cross_site_cookie(self, settings):
        client = TestClient(create_app(settings), base_url="https://testserver")

        response = client.post("/users", json={"email": "alice@x.com"})

        cookie = response.headers["set-cookie"]
        assert "Secure" in cookie
        assert "samesite=none" in cookie.lower()
        assert "HttpOnly" in cookie

        cleared = client.post("/logout").headers["set-cookie"]
        assert "Secure" in cleared
        assert "samesite=none" in cleared.lower()
