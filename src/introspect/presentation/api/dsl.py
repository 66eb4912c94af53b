"""Fluent API entry point.

Example:
    introspect = Introspect(routes=route_records, models=model_provider)
    introspect.routes().uses_middleware("auth").path_starts_with("/admin").get()
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from introspect.domain.exceptions.query import ProviderNotConfiguredError
from introspect.domain.model.configuration import DEFAULT_CONFIG, QueryConfig
from introspect.domain.ports.descriptor_provider import DescriptorProviderPort
from introspect.infrastructure.providers.static import StaticProvider
from introspect.presentation.api.events import EventQuery
from introspect.presentation.api.interfaces import InterfaceQuery
from introspect.presentation.api.jobs import JobQuery
from introspect.presentation.api.middleware import MiddlewareQuery
from introspect.presentation.api.models import ModelQuery
from introspect.presentation.api.providers import ProviderQuery
from introspect.presentation.api.routes import RouteQuery
from introspect.presentation.api.traits import TraitQuery
from introspect.presentation.api.views import ViewQuery

if TYPE_CHECKING:
    from introspect.presentation.api._query import Query

type ProviderSource = DescriptorProviderPort[Any] | Sequence[Any]


def _as_provider(source: ProviderSource | None, domain: str) -> DescriptorProviderPort[Any] | None:
    """Accept provider port or plain record sequence (wrapped in StaticProvider)."""
    if source is None or isinstance(source, DescriptorProviderPort):
        return source
    if isinstance(source, (str, bytes)) or not isinstance(source, Sequence):
        raise TypeError(
            f"{domain} must be a DescriptorProviderPort or a sequence of records, "
            f"got {type(source).__name__}"
        )
    return StaticProvider(source)


class Introspect:
    """Entry point for metadata queries.

    Each accessor returns a fresh query bound to that domain's provider.
    Queries are immutable, so one accessor result can seed many queries.

    Attributes:
        _providers: Provider per domain name, None when not configured
        _config: Configuration passed to every query
    """

    def __init__(
        self,
        *,
        routes: ProviderSource | None = None,
        models: ProviderSource | None = None,
        views: ProviderSource | None = None,
        middleware: ProviderSource | None = None,
        events: ProviderSource | None = None,
        jobs: ProviderSource | None = None,
        providers: ProviderSource | None = None,
        traits: ProviderSource | None = None,
        interfaces: ProviderSource | None = None,
        config: QueryConfig = DEFAULT_CONFIG,
    ) -> None:
        """Initialize entry point.

        Args:
            routes: Route descriptor provider or records
            models: Model descriptor provider or records
            views: View descriptor provider or records
            middleware: Middleware descriptor provider or records
            events: Event descriptor provider or records
            jobs: Job descriptor provider or records
            providers: Service provider descriptor provider or records
            traits: Trait descriptor provider or records
            interfaces: Interface descriptor provider or records
            config: Query configuration

        Raises:
            TypeError: If a source is neither provider nor sequence,
                or config is not a QueryConfig
        """
        if not isinstance(config, QueryConfig):
            raise TypeError(f"config must be QueryConfig, got {type(config).__name__}")
        sources = {
            "routes": routes,
            "models": models,
            "views": views,
            "middleware": middleware,
            "events": events,
            "jobs": jobs,
            "providers": providers,
            "traits": traits,
            "interfaces": interfaces,
        }
        self._providers = {name: _as_provider(src, name) for name, src in sources.items()}
        self._config = config

    def _query[Q: Query[Any]](self, query_type: type[Q]) -> Q:
        provider = self._providers[query_type.DOMAIN]
        if provider is None:
            raise ProviderNotConfiguredError(query_type.DOMAIN)
        return query_type.create(provider, self._config)

    def routes(self) -> RouteQuery:
        """Start route query.

        Raises:
            ProviderNotConfiguredError: If no route provider was given
        """
        return self._query(RouteQuery)

    def models(self) -> ModelQuery:
        """Start model query."""
        return self._query(ModelQuery)

    def views(self) -> ViewQuery:
        """Start view query."""
        return self._query(ViewQuery)

    def middleware(self) -> MiddlewareQuery:
        """Start middleware query."""
        return self._query(MiddlewareQuery)

    def events(self) -> EventQuery:
        """Start event query."""
        return self._query(EventQuery)

    def jobs(self) -> JobQuery:
        """Start job query."""
        return self._query(JobQuery)

    def providers(self) -> ProviderQuery:
        """Start service provider query."""
        return self._query(ProviderQuery)

    def traits(self) -> TraitQuery:
        """Start trait query."""
        return self._query(TraitQuery)

    def interfaces(self) -> InterfaceQuery:
        """Start interface query."""
        return self._query(InterfaceQuery)

    @property
    def config(self) -> QueryConfig:
        """Configuration passed to every query."""
        return self._config
