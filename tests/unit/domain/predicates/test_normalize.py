"""Tests for domain/predicates/normalize.py."""

import pytest

from introspect.domain.predicates.normalize import (
    middleware_base_name,
    normalize_http_method,
    normalize_path,
)


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("api/users", "/api/users"),
        ("/api/users", "/api/users"),
        ("//api", "/api"),
        ("", "/"),
        ("/", "/"),
    ],
)
def test_normalize_path(path: str, expected: str) -> None:
    assert normalize_path(path) == expected


def test_normalize_http_method() -> None:
    assert normalize_http_method("get") == "GET"
    assert normalize_http_method("Patch") == "PATCH"


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("throttle:60,1", "throttle"),
        ("auth", "auth"),
        ("can:update,post", "can"),
        (":odd", ""),
    ],
)
def test_middleware_base_name(token: str, expected: str) -> None:
    assert middleware_base_name(token) == expected
