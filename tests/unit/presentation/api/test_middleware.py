"""Tests for presentation/api/middleware.py."""

from tests.factories import make_middleware, middleware_query, names

CORS = make_middleware("app.http.HandleCors", is_global=True)
AUTH = make_middleware(
    "auth",
    "app.http.middleware.Authenticate",
    groups=("web",),
    used_by_routes=True,
)
THROTTLE = make_middleware(
    "throttle",
    "framework.routing.ThrottleRequests",
    groups=("api",),
    used_by_routes=True,
)
SESSION = make_middleware("framework.session.StartSession", groups=("web",))
MIDDLEWARE = (CORS, AUTH, THROTTLE, SESSION)


class TestMiddlewareQuery:
    """Middleware filters."""

    def test_global(self) -> None:
        assert middleware_query(*MIDDLEWARE).global_().get() == (CORS,)

    def test_in_group(self) -> None:
        assert middleware_query(*MIDDLEWARE).in_group("web").get() == (AUTH, SESSION)

    def test_unknown_group(self) -> None:
        assert not middleware_query(*MIDDLEWARE).in_group("console").exists()

    def test_named_matches_alias(self) -> None:
        assert middleware_query(*MIDDLEWARE).named("auth").get() == (AUTH,)

    def test_named_matches_class(self) -> None:
        query = middleware_query(*MIDDLEWARE).named("*.ThrottleRequests")
        assert names(query.get()) == ["throttle"]

    def test_in_namespace(self) -> None:
        query = middleware_query(*MIDDLEWARE).in_namespace("framework.")
        assert query.get() == (THROTTLE, SESSION)

    def test_in_namespace_is_literal(self) -> None:
        assert not middleware_query(*MIDDLEWARE).in_namespace("framework.*").exists()

    def test_used_by_routes(self) -> None:
        assert middleware_query(*MIDDLEWARE).used_by_routes().get() == (AUTH, THROTTLE)

    def test_combined(self) -> None:
        query = middleware_query(*MIDDLEWARE).in_group("web").used_by_routes()
        assert query.get() == (AUTH,)

    def test_or(self) -> None:
        query = middleware_query(*MIDDLEWARE).global_().or_(lambda q: q.in_group("api"))
        assert query.get() == (CORS, THROTTLE)
