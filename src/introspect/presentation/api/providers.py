"""Service provider query builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from introspect.domain.model.provider import ProviderDescriptor
from introspect.presentation.api._filters import (
    FlagFilter,
    MemberFilter,
    PatternFilter,
    class_name_arg,
    require_str,
)
from introspect.presentation.api._query import Query
from introspect.presentation.api.patterns import compile_pattern


@dataclass(frozen=True, slots=True)
class ProviderQuery(Query[ProviderDescriptor]):
    """Fluent, immutable query over loaded service providers.

    Example:
        providers.deferred().provides("payments").exists()
    """

    DOMAIN: ClassVar[str] = "providers"

    def named(self, pattern: str) -> ProviderQuery:
        """Filter providers by class name pattern."""
        return self._with_filter(
            PatternFilter(kind="name", field="class_name", pattern=compile_pattern(pattern))
        )

    def deferred(self) -> ProviderQuery:
        """Filter providers loaded on first use of a provided service."""
        return self._with_filter(FlagFilter(kind="deferred", field="deferred"))

    def eager(self) -> ProviderQuery:
        """Filter providers loaded at boot."""
        return self._with_filter(FlagFilter(kind="eager", field="deferred", expected=False))

    def provides(self, service: str) -> ProviderQuery:
        """Filter deferred providers resolving service.

        Eager providers declare no services and never match.
        """
        service = require_str(service, "service")
        return self._with_filter(MemberFilter(kind="provides", field="provides", value=service))

    def is_registered(self, provider: type | str) -> bool:
        """Check provider class is loaded, ignoring query filters."""
        name = class_name_arg(provider, "provider")
        return any(record.class_name == name for record in self._provider.fetch_all())

    def deferred_services(self) -> dict[str, str]:
        """Map each deferred service to its provider class, ignoring query filters.

        Returns:
            service -> provider class name; a later provider wins a duplicate service
        """
        return {
            service: record.class_name
            for record in self._provider.fetch_all()
            for service in record.provides
        }

    def provided_services(self, provider: type | str) -> tuple[str, ...]:
        """Deferred services resolved through one provider, ignoring query filters.

        Args:
            provider: Provider class or its fully qualified name

        Returns:
            Service names in registration order, empty for eager or unknown providers
        """
        name = class_name_arg(provider, "provider")
        return tuple(
            service
            for service, owner in self.deferred_services().items()
            if owner == name
        )
