"""Descriptor provider adapters."""

from introspect.infrastructure.providers.static import CallableProvider, StaticProvider

__all__ = ["CallableProvider", "StaticProvider"]
