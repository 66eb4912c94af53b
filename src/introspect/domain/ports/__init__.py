"""Domain ports (interfaces for infrastructure)."""

from introspect.domain.ports.descriptor_provider import DescriptorProviderPort

__all__ = ["DescriptorProviderPort"]
