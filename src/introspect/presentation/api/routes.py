"""Route query builder.

Example:
    routes = Introspect(routes=provider).routes()
    admin = (
        routes.uses_middleware("auth")
        .path_starts_with("/admin/*")
        .or_(lambda q: q.name_starts_with("admin."))
        .get()
    )
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from introspect.domain.model.route import RouteDescriptor
from introspect.domain.predicates.membership import as_targets
from introspect.domain.predicates.normalize import normalize_http_method
from introspect.domain.predicates.route_predicates import (
    uses_controller,
    uses_middleware,
    uses_middlewares,
)
from introspect.presentation.api._filters import (
    ContainsFilter,
    FilterBase,
    NegatedFilter,
    PatternFilter,
    SuffixFilter,
    class_name_arg,
    make_prefix_filter,
    require_str,
)
from introspect.presentation.api._query import Query
from introspect.presentation.api.patterns import compile_pattern


@dataclass(frozen=True, slots=True)
class ControllerFilter(FilterBase):
    """Route bound to controller class (and method)."""

    controller: str
    method: str | None = None

    @property
    def kind(self) -> str:
        return "controller"

    def test(self, record: RouteDescriptor) -> bool:
        return uses_controller(record, self.controller, self.method)


@dataclass(frozen=True, slots=True)
class MiddlewareFilter(FilterBase):
    """Route has middleware, compared by base name."""

    middleware: str

    @property
    def kind(self) -> str:
        return "middleware"

    def test(self, record: RouteDescriptor) -> bool:
        return uses_middleware(record, self.middleware)


@dataclass(frozen=True, slots=True)
class MiddlewaresFilter(FilterBase):
    """Route has all/any of several middlewares."""

    middlewares: tuple[str, ...]
    match_all: bool = True

    @property
    def kind(self) -> str:
        return "middlewares"

    def test(self, record: RouteDescriptor) -> bool:
        return uses_middlewares(record, self.middlewares, match_all=self.match_all)


@dataclass(frozen=True, slots=True)
class HttpMethodFilter(FilterBase):
    """Route accepts HTTP method."""

    method: str

    @property
    def kind(self) -> str:
        return "method"

    def test(self, record: RouteDescriptor) -> bool:
        return any(normalize_http_method(m) == self.method for m in record.methods)


@dataclass(frozen=True, slots=True)
class RouteQuery(Query[RouteDescriptor]):
    """Fluent, immutable query over registered routes."""

    DOMAIN: ClassVar[str] = "routes"

    def uses_controller(self, controller: type | str, method: str | None = None) -> RouteQuery:
        """Filter routes bound to controller.

        Args:
            controller: Controller class or its fully qualified name
            method: Controller method, None = any method

        Returns:
            Filtered query
        """
        target = class_name_arg(controller, "controller")
        return self._with_filter(ControllerFilter(controller=target, method=method))

    def uses_middleware(self, middleware: str) -> RouteQuery:
        """Filter routes with middleware ("throttle" also matches "throttle:60,1")."""
        return self._with_filter(MiddlewareFilter(require_str(middleware, "middleware")))

    def uses_middlewares(self, middlewares: Iterable[str], match_all: bool = True) -> RouteQuery:
        """Filter routes with several middlewares.

        Args:
            middlewares: Middleware names
            match_all: True = every middleware required, False = any one

        Returns:
            Filtered query. An empty list matches no route.
        """
        targets = as_targets(middlewares, "middlewares")
        return self._with_filter(MiddlewaresFilter(middlewares=targets, match_all=match_all))

    def without_middleware(self, middleware: str) -> RouteQuery:
        """Filter routes without middleware."""
        positive = MiddlewareFilter(require_str(middleware, "middleware"))
        return self._with_filter(NegatedFilter(inner=positive))

    def named(self, pattern: str) -> RouteQuery:
        """Filter routes by name pattern. Unnamed routes never match."""
        return self._with_filter(
            PatternFilter(kind="name", field="name", pattern=compile_pattern(pattern))
        )

    def not_named(self, pattern: str) -> RouteQuery:
        """Filter routes whose name does not match pattern. Unnamed routes pass."""
        positive = PatternFilter(kind="name", field="name", pattern=compile_pattern(pattern))
        return self._with_filter(NegatedFilter(inner=positive))

    def name_starts_with(self, prefix: str) -> RouteQuery:
        """Filter routes by name prefix (literal)."""
        prefix = require_str(prefix, "prefix")
        return self._with_filter(make_prefix_filter("name_prefix", "name", prefix))

    def name_ends_with(self, suffix: str) -> RouteQuery:
        """Filter routes by name suffix (literal)."""
        suffix = require_str(suffix, "suffix")
        return self._with_filter(SuffixFilter(kind="name_suffix", field="name", suffix=suffix))

    def path_matching(self, pattern: str) -> RouteQuery:
        """Filter routes by path pattern ("/api/*", "/users/{id}")."""
        return self._with_filter(
            PatternFilter(kind="path", field="path", pattern=compile_pattern(pattern))
        )

    def path_starts_with(self, prefix: str) -> RouteQuery:
        """Filter routes by path prefix.

        A prefix containing * is matched as a whole-path wildcard pattern
        ("/admin/*"), anything else as a literal prefix.
        """
        prefix = require_str(prefix, "prefix")
        return self._with_filter(
            make_prefix_filter("path_prefix", "path", prefix, wildcards=True)
        )

    def path_ends_with(self, suffix: str) -> RouteQuery:
        """Filter routes by path suffix (literal)."""
        suffix = require_str(suffix, "suffix")
        return self._with_filter(SuffixFilter(kind="path_suffix", field="path", suffix=suffix))

    def path_contains(self, substring: str) -> RouteQuery:
        """Filter routes whose path contains substring (literal)."""
        substring = require_str(substring, "substring")
        return self._with_filter(
            ContainsFilter(kind="path_contains", field="path", substring=substring)
        )

    def uses_method(self, http_method: str) -> RouteQuery:
        """Filter routes accepting HTTP method (case-insensitive)."""
        method = normalize_http_method(require_str(http_method, "http_method"))
        return self._with_filter(HttpMethodFilter(method=method))
