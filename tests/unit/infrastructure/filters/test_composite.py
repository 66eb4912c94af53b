"""Tests for composite predicates.

Tests:
- all_of: AND composition
- any_of: OR composition
"""

from introspect.infrastructure.filters.composite import all_of, any_of
from tests.factories import make_route

ADMIN = make_route("/admin", name="admin.home", middleware=("web", "auth"))
LOGIN = make_route("/login", name="login", middleware=("web",))
API = make_route("/api/users", middleware=("api",))


def is_named(route: object) -> bool:
    return route.name is not None  # type: ignore[attr-defined]


def is_web(route: object) -> bool:
    return "web" in route.middleware  # type: ignore[attr-defined]


def is_auth(route: object) -> bool:
    return "auth" in route.middleware  # type: ignore[attr-defined]


class TestAllOf:
    """Tests for all_of (AND) composition."""

    def test_all_pass(self) -> None:
        assert all_of(is_named, is_web, is_auth)(ADMIN) is True

    def test_one_fails(self) -> None:
        flt = all_of(is_named, is_auth)

        assert flt(LOGIN) is False
        assert flt(API) is False

    def test_empty_passes_everything(self) -> None:
        assert all_of()(API) is True

    def test_short_circuits(self) -> None:
        calls: list[str] = []

        def tracked(route: object) -> bool:
            calls.append("tracked")
            return True

        assert all_of(is_named, tracked)(API) is False
        assert calls == []


class TestAnyOf:
    """Tests for any_of (OR) composition."""

    def test_one_passes(self) -> None:
        assert any_of(is_auth, is_named)(LOGIN) is True

    def test_none_pass(self) -> None:
        assert any_of(is_named, is_web)(API) is False

    def test_empty_passes_nothing(self) -> None:
        assert any_of()(ADMIN) is False


class TestNesting:
    """Nested composition."""

    def test_and_of_or(self) -> None:
        flt = all_of(is_web, any_of(is_auth, lambda r: r.name == "login"))

        assert [flt(r) for r in (ADMIN, LOGIN, API)] == [True, True, False]

    def test_or_of_and(self) -> None:
        flt = any_of(all_of(is_web, is_auth), lambda r: r.path.startswith("/api"))

        assert [flt(r) for r in (ADMIN, LOGIN, API)] == [True, False, True]
