"""Query construction exceptions."""

from introspect.domain.exceptions.base import IntrospectError


class FilterOverwriteError(IntrospectError):
    """Same filter kind registered twice under strict overwrite policy.

    Raised only when QueryConfig.on_overwrite is OverwritePolicy.STRICT.
    Default policy silently replaces the earlier filter.

    Attributes:
        kind: Filter kind that was registered twice (must not be empty)
    """

    def __init__(self, kind: str) -> None:
        if not kind:
            raise ValueError("kind must not be empty")

        self.kind = kind
        super().__init__(f"filter '{kind}' is already set on this query")


class ProviderNotConfiguredError(IntrospectError):
    """Entry point has no descriptor provider for requested domain.

    Attributes:
        domain: Domain name (e.g., "routes", "models")
    """

    def __init__(self, domain: str) -> None:
        if not domain:
            raise ValueError("domain must not be empty")

        self.domain = domain
        super().__init__(
            f"no descriptor provider configured for '{domain}'. "
            f"Pass {domain}=... to Introspect()."
        )
