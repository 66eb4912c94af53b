"""Name filters and class scoping shared by trait and interface queries.

Internal module - not part of public API.

in_(classes) keeps only records used/implemented by at least one listed
class; an empty list keeps nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from introspect.presentation.api._filters import (
    ContainsFilter,
    MemberFilter,
    PatternFilter,
    SuffixFilter,
    class_name_arg,
    make_prefix_filter,
    require_str,
)
from introspect.presentation.api._query import ScopedQuery
from introspect.presentation.api.patterns import compile_pattern


@dataclass(frozen=True, slots=True)
class NamedTypeQuery[T](ScopedQuery[T]):
    """Base for queries over named types.

    Subclasses set USERS_FIELD: the record field listing classes that
    use/implement the record.
    """

    USERS_FIELD: ClassVar[str] = ""

    def named(self, pattern: str) -> NamedTypeQuery[T]:
        """Filter by fully qualified name pattern."""
        return self._with_filter(
            PatternFilter(kind="name", field="name", pattern=compile_pattern(pattern))
        )

    def name_starts_with(self, prefix: str) -> NamedTypeQuery[T]:
        """Filter by name prefix (case-sensitive)."""
        prefix = require_str(prefix, "prefix")
        return self._with_filter(make_prefix_filter("name_prefix", "name", prefix))

    def name_ends_with(self, suffix: str) -> NamedTypeQuery[T]:
        """Filter by name suffix (case-sensitive)."""
        suffix = require_str(suffix, "suffix")
        return self._with_filter(SuffixFilter(kind="name_suffix", field="name", suffix=suffix))

    def name_contains(self, substring: str) -> NamedTypeQuery[T]:
        """Filter by substring of name (case-sensitive)."""
        substring = require_str(substring, "substring")
        return self._with_filter(
            ContainsFilter(kind="name_contains", field="name", substring=substring)
        )

    def _in_scope(self, record: T, scope: frozenset[str]) -> bool:
        """Some class in scope uses or implements the record."""
        return not scope.isdisjoint(getattr(record, self.USERS_FIELD))

    def _with_user(self, cls: type | str) -> NamedTypeQuery[T]:
        name = class_name_arg(cls, "cls")
        return self._with_filter(
            MemberFilter(kind=self.USERS_FIELD, field=self.USERS_FIELD, value=name)
        )
