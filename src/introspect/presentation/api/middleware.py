"""Middleware query builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from introspect.domain.model.middleware import MiddlewareDescriptor
from introspect.presentation.api._filters import (
    FilterBase,
    FlagFilter,
    MemberFilter,
    make_prefix_filter,
    require_str,
)
from introspect.presentation.api._query import Query
from introspect.presentation.api.patterns import CompiledPattern, compile_pattern


@dataclass(frozen=True, slots=True)
class AliasOrClassFilter(FilterBase):
    """Middleware alias or class name matches pattern."""

    pattern: CompiledPattern

    @property
    def kind(self) -> str:
        return "name"

    def test(self, record: MiddlewareDescriptor) -> bool:
        return self.pattern.match(record.name) or self.pattern.match(record.class_name)


@dataclass(frozen=True, slots=True)
class MiddlewareQuery(Query[MiddlewareDescriptor]):
    """Fluent, immutable query over registered middleware.

    Example:
        middleware.in_group("web").used_by_routes().get()
    """

    DOMAIN: ClassVar[str] = "middleware"

    def global_(self) -> MiddlewareQuery:
        """Filter middleware running on every request."""
        return self._with_filter(FlagFilter(kind="global", field="is_global"))

    def in_group(self, group: str) -> MiddlewareQuery:
        """Filter middleware belonging to group ("web", "api")."""
        group = require_str(group, "group")
        return self._with_filter(MemberFilter(kind="group", field="groups", value=group))

    def named(self, pattern: str) -> MiddlewareQuery:
        """Filter middleware whose alias or class name matches pattern."""
        return self._with_filter(AliasOrClassFilter(pattern=compile_pattern(pattern)))

    def in_namespace(self, namespace: str) -> MiddlewareQuery:
        """Filter middleware whose class lives under namespace prefix."""
        namespace = require_str(namespace, "namespace")
        return self._with_filter(make_prefix_filter("namespace", "class_name", namespace))

    def used_by_routes(self) -> MiddlewareQuery:
        """Filter middleware assigned to at least one route."""
        return self._with_filter(FlagFilter(kind="used_by_routes", field="used_by_routes"))
