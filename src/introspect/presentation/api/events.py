"""Event query builder.

Listener filters compare normalized listener names, so a listener
registered as a class, an instance, a (target, method) pair or a class
name string all match has_listener() with the class or its name.
Functions and lambdas normalize to "Closure".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from introspect.domain.model.event import EventDescriptor
from introspect.presentation.api._filters import (
    FilterBase,
    FlagFilter,
    PatternFilter,
    SuffixFilter,
    class_name_arg,
    make_prefix_filter,
    require_str,
)
from introspect.presentation.api._query import Query
from introspect.presentation.api.patterns import compile_pattern


@dataclass(frozen=True, slots=True)
class ListenerFilter(FilterBase):
    """Event has listener normalizing to class name."""

    listener: str

    @property
    def kind(self) -> str:
        return "has_listener"

    def test(self, record: EventDescriptor) -> bool:
        return self.listener in record.listener_names()


@dataclass(frozen=True, slots=True)
class EventQuery(Query[EventDescriptor]):
    """Fluent, immutable query over dispatchable events."""

    DOMAIN: ClassVar[str] = "events"

    def named(self, pattern: str) -> EventQuery:
        """Filter events by name pattern ("app.events.*")."""
        return self._with_filter(
            PatternFilter(kind="name", field="name", pattern=compile_pattern(pattern))
        )

    def name_starts_with(self, prefix: str) -> EventQuery:
        """Filter by name prefix (case-sensitive)."""
        prefix = require_str(prefix, "prefix")
        return self._with_filter(make_prefix_filter("name_prefix", "name", prefix))

    def name_ends_with(self, suffix: str) -> EventQuery:
        """Filter by name suffix (case-sensitive)."""
        suffix = require_str(suffix, "suffix")
        return self._with_filter(SuffixFilter(kind="name_suffix", field="name", suffix=suffix))

    def has_listener(self, listener: type | str) -> EventQuery:
        """Filter events with listener.

        Args:
            listener: Listener class or its fully qualified name

        Returns:
            Filtered query
        """
        name = class_name_arg(listener, "listener")
        return self._with_filter(ListenerFilter(listener=name))

    def has_listeners(self) -> EventQuery:
        """Filter events with at least one listener."""
        return self._with_filter(FlagFilter(kind="has_listeners", field="has_listeners"))

    def has_no_listeners(self) -> EventQuery:
        """Filter events without listeners."""
        return self._with_filter(
            FlagFilter(kind="has_no_listeners", field="has_listeners", expected=False)
        )

    def listeners_for(self, event: str) -> tuple[str, ...]:
        """Normalized listener names of one event, ignoring query filters.

        Args:
            event: Event name

        Returns:
            Listener names in registration order, empty if event is unknown
        """
        require_str(event, "event")
        for record in self._provider.fetch_all():
            if record.name == event:
                return record.listener_names()
        return ()

    def event_has_listeners(self, event: type | str) -> bool:
        """Check one event has at least one listener, ignoring query filters.

        Args:
            event: Event class or event name

        Returns:
            False for an unknown event
        """
        name = class_name_arg(event, "event")
        return any(
            record.name == name and record.has_listeners for record in self._provider.fetch_all()
        )
