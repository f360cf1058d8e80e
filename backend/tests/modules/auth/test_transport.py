"""Tests for session token transport."""

import pytest
from fastapi import Request, Response

from modules.auth.transport import SessionTransport


def make_request(headers: dict[str, str] | None = None) -> Request:
    raw = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw})


def set_cookie_header(response: Response) -> str:
    [header] = response.headers.getlist("set-cookie")
    return header


@pytest.fixture
def transport() -> SessionTransport:
    return SessionTransport(cookie_name="token", secure=False, max_age=3600)


@pytest.fixture
def secure_transport() -> SessionTransport:
    return SessionTransport(cookie_name="token", secure=True, max_age=3600)


class TestExtract:
    def test_reads_cookie(self, transport):
        request = make_request({"Cookie": "token=from-cookie"})
        assert transport.extract(request) == "from-cookie"

    def test_reads_bearer_header(self, transport):
        request = make_request({"Authorization": "Bearer from-header"})
        assert transport.extract(request) == "from-header"

    def test_cookie_takes_precedence(self, transport):
        """The cookie is consulted before the Authorization header."""
        request = make_request({
            "Cookie": "token=from-cookie",
            "Authorization": "Bearer from-header",
        })
        assert transport.extract(request) == "from-cookie"

    def test_bearer_scheme_is_case_insensitive(self, transport):
        request = make_request({"Authorization": "bearer lower"})
        assert transport.extract(request) == "lower"

    def test_other_schemes_ignored(self, transport):
        request = make_request({"Authorization": "Basic dXNlcjpwYXNz"})
        assert transport.extract(request) is None

    def test_other_cookies_ignored(self, transport):
        request = make_request({"Cookie": "session=abc"})
        assert transport.extract(request) is None

    def test_nothing_supplied(self, transport):
        assert transport.extract(make_request()) is None


class TestAttach:
    def test_development_attributes(self, transport):
        response = Response()
        transport.attach(response, "abc")
        header = set_cookie_header(response)

        assert header.startswith("token=abc")
        assert "HttpOnly" in header
        assert "Secure" not in header
        assert "samesite=lax" in header.lower()
        assert "Max-Age=3600" in header
        assert "Path=/" in header

    def test_production_attributes(self, secure_transport):
        response = Response()
        secure_transport.attach(response, "abc")
        header = set_cookie_header(response)

        assert "HttpOnly" in header
        assert "Secure" in header
        assert "samesite=none" in header.lower()


class TestClear:
    @pytest.mark.parametrize("secure", [False, True])
    def test_clear_mirrors_attach(self, secure):
        """Clearing must use the same attribute profile as setting."""
        transport = SessionTransport(cookie_name="token", secure=secure, max_age=3600)
        set_response, clear_response = Response(), Response()
        transport.attach(set_response, "abc")
        transport.clear(clear_response)

        def attributes(header: str) -> set[str]:
            parts = [p.strip() for p in header.split(";")[1:]]
            return {
                p.lower() for p in parts
                if not p.lower().startswith(("max-age", "expires"))
            }

        cleared = set_cookie_header(clear_response)
        assert cleared.startswith("token=")
        assert "Max-Age=0" in cleared
        assert attributes(cleared) == attributes(set_cookie_header(set_response))
