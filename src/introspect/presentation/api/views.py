"""View query builder.

Example:
    views.extends("layouts.*").doesnt_use("partials.legacy.*").get()
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from introspect.domain.model.view import ViewDescriptor
from introspect.presentation.api._filters import (
    ContainsFilter,
    FilterBase,
    NegatedFilter,
    PatternFilter,
    SuffixFilter,
    make_prefix_filter,
    require_str,
)
from introspect.presentation.api._query import Query
from introspect.presentation.api.patterns import CompiledPattern, compile_pattern


@dataclass(frozen=True, slots=True)
class IncludesFilter(FilterBase):
    """View includes some view matching pattern."""

    pattern: CompiledPattern

    @property
    def kind(self) -> str:
        return "uses"

    def test(self, record: ViewDescriptor) -> bool:
        return any(self.pattern.match(name) for name in record.includes)


@dataclass(frozen=True, slots=True)
class UsedByFilter(FilterBase):
    """View is included by another view whose name matches pattern.

    Depends on the whole population: prepare() collects the names included
    by matching views once per terminal call.
    """

    pattern: CompiledPattern
    included: frozenset[str] = frozenset()

    @property
    def kind(self) -> str:
        return "used_by"

    def prepare(self, population: Sequence[ViewDescriptor]) -> UsedByFilter:
        included = frozenset(
            name
            for parent in population
            if self.pattern.match(parent.name)
            for name in parent.includes
            if name != parent.name
        )
        return UsedByFilter(pattern=self.pattern, included=included)

    def test(self, record: ViewDescriptor) -> bool:
        return record.name in self.included

    def describe(self) -> str:
        return f"used_by(pattern={self.pattern})"


@dataclass(frozen=True, slots=True)
class ViewQuery(Query[ViewDescriptor]):
    """Fluent, immutable query over view templates."""

    DOMAIN: ClassVar[str] = "views"

    def named(self, pattern: str) -> ViewQuery:
        """Filter views by name pattern ("emails.*")."""
        return self._with_filter(
            PatternFilter(kind="name", field="name", pattern=compile_pattern(pattern))
        )

    def name_starts_with(self, prefix: str) -> ViewQuery:
        """Filter by name prefix (case-sensitive)."""
        prefix = require_str(prefix, "prefix")
        return self._with_filter(make_prefix_filter("name_prefix", "name", prefix))

    def name_ends_with(self, suffix: str) -> ViewQuery:
        """Filter by name suffix (case-sensitive)."""
        suffix = require_str(suffix, "suffix")
        return self._with_filter(SuffixFilter(kind="name_suffix", field="name", suffix=suffix))

    def name_contains(self, substring: str) -> ViewQuery:
        """Filter by substring of name (case-sensitive)."""
        substring = require_str(substring, "substring")
        return self._with_filter(
            ContainsFilter(kind="name_contains", field="name", substring=substring)
        )

    def used_by(self, pattern: str) -> ViewQuery:
        """Filter views included by some other view matching pattern.

        Args:
            pattern: Name pattern of the including view

        Returns:
            Filtered query
        """
        return self._with_filter(UsedByFilter(pattern=compile_pattern(pattern)))

    def not_used_by(self, pattern: str) -> ViewQuery:
        """Filter views no view matching pattern includes."""
        positive = UsedByFilter(pattern=compile_pattern(pattern))
        return self._with_filter(NegatedFilter(inner=positive))

    def uses(self, pattern: str) -> ViewQuery:
        """Filter views including some view matching pattern."""
        return self._with_filter(IncludesFilter(pattern=compile_pattern(pattern)))

    def doesnt_use(self, pattern: str) -> ViewQuery:
        """Filter views including no view matching pattern."""
        positive = IncludesFilter(pattern=compile_pattern(pattern))
        return self._with_filter(NegatedFilter(inner=positive))

    def extends(self, pattern: str) -> ViewQuery:
        """Filter views extending layout matching pattern. Views without layout never match."""
        return self._with_filter(
            PatternFilter(kind="extends", field="extends", pattern=compile_pattern(pattern))
        )

    def doesnt_extend(self, pattern: str) -> ViewQuery:
        """Filter views not extending layout matching pattern. Views without layout pass."""
        positive = PatternFilter(kind="extends", field="extends", pattern=compile_pattern(pattern))
        return self._with_filter(NegatedFilter(inner=positive))
