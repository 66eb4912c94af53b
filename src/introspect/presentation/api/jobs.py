"""Queued job query builder.

Example:
    jobs.on_queue("emails").unique().with_tries(3).get()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from introspect.domain.model.job import JobDescriptor
from introspect.presentation.api._filters import (
    EqualsFilter,
    FlagFilter,
    MemberFilter,
    PatternFilter,
    class_name_arg,
    require_str,
)
from introspect.presentation.api._query import ScopedQuery
from introspect.presentation.api.patterns import compile_pattern


@dataclass(frozen=True, slots=True)
class JobQuery(ScopedQuery[JobDescriptor]):
    """Fluent, immutable query over queueable job classes.

    in_() restricts candidates to the listed job classes.
    """

    DOMAIN: ClassVar[str] = "jobs"

    def _in_scope(self, record: JobDescriptor, scope: frozenset[str]) -> bool:
        """Job class is listed."""
        return record.class_name in scope

    def on_queue(self, queue: str) -> JobQuery:
        """Filter jobs declaring queue. Jobs without declared queue never match."""
        queue = require_str(queue, "queue")
        return self._with_filter(EqualsFilter(kind="queue", field="queue", value=queue))

    def on_connection(self, connection: str) -> JobQuery:
        """Filter jobs declaring connection. Jobs without declared connection never match."""
        connection = require_str(connection, "connection")
        return self._with_filter(
            EqualsFilter(kind="connection", field="connection", value=connection)
        )

    def named(self, pattern: str) -> JobQuery:
        """Filter jobs by class name pattern ("app.jobs.*")."""
        return self._with_filter(
            PatternFilter(kind="name", field="class_name", pattern=compile_pattern(pattern))
        )

    def has_trait(self, trait: type | str) -> JobQuery:
        """Filter jobs using trait/mixin (directly or inherited)."""
        name = class_name_arg(trait, "trait")
        return self._with_filter(MemberFilter(kind="trait", field="traits", value=name))

    def unique(self) -> JobQuery:
        """Filter jobs implementing the unique-job contract."""
        return self._with_filter(FlagFilter(kind="unique", field="is_unique"))

    def encrypted(self) -> JobQuery:
        """Filter jobs implementing the encrypted-job contract."""
        return self._with_filter(FlagFilter(kind="encrypted", field="is_encrypted"))

    def has_middleware(self) -> JobQuery:
        """Filter jobs declaring at least one job middleware."""
        return self._with_filter(FlagFilter(kind="has_middleware", field="has_middleware"))

    def with_tries(self, tries: int) -> JobQuery:
        """Filter jobs declaring exactly this many attempts.

        Args:
            tries: Expected max attempts

        Returns:
            Filtered query

        Raises:
            TypeError: If tries is not an int
        """
        if isinstance(tries, bool) or not isinstance(tries, int):
            raise TypeError(f"tries must be int, got {type(tries).__name__}")
        return self._with_filter(EqualsFilter(kind="tries", field="tries", value=tries))

    def implements(self, interface: type | str) -> JobQuery:
        """Filter jobs implementing contract."""
        name = class_name_arg(interface, "interface")
        return self._with_filter(MemberFilter(kind="interface", field="interfaces", value=name))
