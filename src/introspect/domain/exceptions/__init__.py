"""Domain exceptions."""

from introspect.domain.exceptions.base import IntrospectError
from introspect.domain.exceptions.query import FilterOverwriteError, ProviderNotConfiguredError

__all__ = [
    "IntrospectError",
    "FilterOverwriteError",
    "ProviderNotConfiguredError",
]
