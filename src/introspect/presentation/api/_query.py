"""Predicate registry, OR-branch composition and terminal operations.

Internal module - not part of public API.

Matching rules for one query:
    no branches                  -> main filters (AND)
    branches, main filters set   -> main OR any branch
    branches, no main filters    -> any branch (empty main set is not "true")
    nothing registered           -> every record
    scope set (in_)              -> scope AND the result above

Branches are full queries and recurse the same way.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, ClassVar, Self

from introspect.domain.exceptions.query import FilterOverwriteError
from introspect.domain.model.configuration import DEFAULT_CONFIG, QueryConfig
from introspect.domain.model.enums import OverwritePolicy
from introspect.domain.predicates.membership import as_targets
from introspect.infrastructure.filters.composite import all_of, any_of
from introspect.presentation.api._filters import CustomFilter, class_name_arg

if TYPE_CHECKING:
    from introspect.domain.ports.descriptor_provider import DescriptorProviderPort
    from introspect.infrastructure.filters.types import Predicate
    from introspect.presentation.api._filters import Filter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FilterSet[T]:
    """Ordered filters of one query, one per kind (AND semantics).

    Attributes:
        filters: Registered filters in registration order
    """

    filters: tuple[Filter[T], ...] = ()

    def add(self, flt: Filter[T], config: QueryConfig = DEFAULT_CONFIG) -> FilterSet[T]:
        """Return new set with filter registered.

        Same kind registered again replaces the earlier filter in place
        (last write wins) unless the filter accumulates.

        Args:
            flt: Filter to register
            config: Overwrite policy source

        Returns:
            New FilterSet (immutable)

        Raises:
            FilterOverwriteError: Kind already set and policy is STRICT
        """
        if flt.accumulates:
            return FilterSet(filters=(*self.filters, flt))

        for index, existing in enumerate(self.filters):
            if existing.kind != flt.kind:
                continue
            match config.on_overwrite:
                case OverwritePolicy.STRICT:
                    raise FilterOverwriteError(flt.kind)
                case OverwritePolicy.WARN:
                    logger.warning(
                        "filter '%s' overwritten: %s -> %s",
                        flt.kind,
                        existing.describe(),
                        flt.describe(),
                    )
            updated = (*self.filters[:index], flt, *self.filters[index + 1 :])
            return FilterSet(filters=updated)

        return FilterSet(filters=(*self.filters, flt))

    def matches(self, record: T) -> bool:
        """Check record satisfies every filter, short-circuiting on first failure.

        Filters are bound to the record alone; use prepare() for filters
        that look at other records.
        """
        return self.prepare((record,))(record)

    def prepare(self, population: Sequence[T]) -> Predicate[T]:
        """Bind filters to population and combine them with AND.

        Args:
            population: Materialized candidate collection

        Returns:
            Predicate true when every filter passes (empty set = always true)
        """
        return all_of(*(flt.prepare(population).test for flt in self.filters))

    def __len__(self) -> int:
        return len(self.filters)

    def __bool__(self) -> bool:
        return bool(self.filters)

    def __iter__(self) -> Iterator[Filter[T]]:
        return iter(self.filters)


@dataclass(frozen=True, slots=True)
class Query[T]:
    """Immutable query builder base.

    Every filter method returns a new query; the receiver never changes.
    Subclasses add domain filter methods and set DOMAIN.

    Attributes:
        _provider: Source of candidate records
        _filters: Main filter set (AND)
        _branches: OR branches, each a full query of the same type
        _config: Query configuration, inherited by branches
    """

    DOMAIN: ClassVar[str] = "records"

    _provider: DescriptorProviderPort[T]
    _filters: FilterSet[T] = FilterSet()
    _branches: tuple[Any, ...] = ()
    _config: QueryConfig = DEFAULT_CONFIG

    @classmethod
    def create(
        cls,
        provider: DescriptorProviderPort[T],
        config: QueryConfig = DEFAULT_CONFIG,
    ) -> Self:
        """Create new query over provider.

        Args:
            provider: Descriptor provider for this domain
            config: Query configuration

        Returns:
            Fresh query with no filters

        Raises:
            TypeError: If provider is None
        """
        if provider is None:
            raise TypeError("provider must not be None")
        return cls(_provider=provider, _config=config)

    def _with_filter(self, flt: Filter[T]) -> Self:
        """Return new query with filter registered (immutable)."""
        return replace(self, _filters=self._filters.add(flt, self._config))

    def that(self, predicate: Callable[[T], bool]) -> Self:
        """Filter by custom predicate.

        Unlike other filters, every that() call is kept.

        Args:
            predicate: Function returning True for matching records

        Returns:
            Filtered query

        Raises:
            TypeError: If predicate is not callable
        """
        if not callable(predicate):
            raise TypeError(f"predicate must be callable, got {type(predicate).__name__}")
        return self._with_filter(CustomFilter(predicate=predicate))

    def or_(self, configure: Callable[[Self], Self]) -> Self:
        """Add OR branch.

        configure receives a fresh query of the same type and returns it
        configured. Records matching the main filters OR any branch match.

        Example:
            routes.uses_middleware("auth").or_(lambda q: q.name_starts_with("public."))

        Args:
            configure: Builds the branch from an empty query

        Returns:
            Query with added branch

        Raises:
            TypeError: If configure does not return a query of the same type
        """
        if not callable(configure):
            raise TypeError(f"configure must be callable, got {type(configure).__name__}")
        fresh = type(self)(_provider=self._provider, _config=self._config)
        branch = configure(fresh)
        if not isinstance(branch, type(self)):
            raise TypeError(
                f"or_() callback must return {type(self).__name__}, got {type(branch).__name__}"
            )
        return replace(self, _branches=(*self._branches, branch))

    def compile(self, population: Sequence[T]) -> Predicate[T]:
        """Build predicate for whole query (main filters and branches).

        Args:
            population: Materialized candidate collection

        Returns:
            Predicate deciding whether a record matches this query
        """
        main = self._filters.prepare(population)
        branches = tuple(branch.compile(population) for branch in self._branches)

        if not branches:
            return main
        if self._filters:
            return any_of(main, *branches)
        return any_of(*branches)

    def matches(self, record: T, population: Sequence[T] | None = None) -> bool:
        """Check single record against query.

        Args:
            record: Record to test
            population: Collection for population-dependent filters,
                defaults to the record alone

        Returns:
            True if record matches
        """
        return self.compile(population if population is not None else (record,))(record)

    def get(self) -> tuple[T, ...]:
        """Execute query and return matching records.

        Fetches the full collection once, then filters in memory.
        Provider errors propagate unchanged.

        Returns:
            Matching records in provider order
        """
        population = tuple(self._provider.fetch_all())
        predicate = self.compile(population)
        result = tuple(record for record in population if predicate(record))
        logger.debug(
            "%s query: %d of %d candidates matched",
            self.DOMAIN,
            len(result),
            len(population),
        )
        return result

    def first(self) -> T | None:
        """Return first matching record in provider order, None if none."""
        population = tuple(self._provider.fetch_all())
        predicate = self.compile(population)
        return next((record for record in population if predicate(record)), None)

    def exists(self) -> bool:
        """Check if any record matches."""
        return self.first() is not None

    def count(self) -> int:
        """Count matching records."""
        return len(self.get())

    def explain(self) -> str:
        """Render query structure (filters, scope, branches) as text tree."""
        from introspect.application.reporters.query_tree import explain_query

        return explain_query(self)

    @property
    def filters(self) -> tuple[Filter[T], ...]:
        """Main filters in registration order."""
        return self._filters.filters

    @property
    def branches(self) -> tuple[Self, ...]:
        """OR branches in registration order."""
        return self._branches

    @property
    def scope(self) -> frozenset[str] | None:
        """Candidate scope, None for queries without in_()."""
        return None

    @property
    def config(self) -> QueryConfig:
        """Query configuration."""
        return self._config


@dataclass(frozen=True, slots=True)
class ScopedQuery[T](Query[T], ABC):
    """Query whose candidates can be restricted to a set of classes with in_().

    The scope is a precondition on the combined main/OR result:
    a scoped record must also match the filters or a branch.

    Attributes:
        _scope: Class identifiers set by in_(), None = unscoped
    """

    _scope: frozenset[str] | None = None

    def in_(self, class_names: Iterable[type | str]) -> Self:
        """Restrict candidates to records related to at least one listed class.

        Args:
            class_names: Classes or fully qualified class names

        Returns:
            Scoped query. An empty list matches nothing.

        Raises:
            TypeError: If class_names is None, a bare string, or contains None
        """
        targets = as_targets(class_names, "class_names")
        scope = frozenset(class_name_arg(name, "class_names") for name in targets)
        return replace(self, _scope=scope)

    @abstractmethod
    def _in_scope(self, record: T, scope: frozenset[str]) -> bool:
        """Check record relates to some class in scope."""

    def compile(self, population: Sequence[T]) -> Predicate[T]:
        """Build predicate for whole query, scope included."""
        combined = Query.compile(self, population)
        if self._scope is None:
            return combined
        scope = self._scope
        return all_of(lambda record: self._in_scope(record, scope), combined)

    @property
    def scope(self) -> frozenset[str] | None:
        """Candidate scope set by in_(), None if unscoped."""
        return self._scope
