"""Unit tests for bearer token extraction."""

from starlette.requests import Request

from blog.interface.api.auth import extract_token


def _request(headers: dict[str, str]) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": [
            (name.lower().encode(), value.encode()) for name, value in headers.items()
        ],
    }
    return Request(scope)


def test_bearer_header_is_used():
    assert extract_token(_request({"Authorization": "Bearer abc"})) == "abc"


def test_scheme_is_case_insensitive():
    assert extract_token(_request({"Authorization": "bearer abc"})) == "abc"


def test_cookie_is_the_fallback():
    assert extract_token(_request({"Cookie": "auth_token=xyz"})) == "xyz"


def test_header_wins_over_cookie():
    request = _request({"Authorization": "Bearer abc", "Cookie": "auth_token=xyz"})
    assert extract_token(request) == "abc"


def test_other_schemes_are_ignored():
    assert extract_token(_request({"Authorization": "Basic Zm9vOmJhcg=="})) is None


def test_no_credentials():
    assert extract_token(_request({})) is None
