"""Service provider descriptor."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProviderDescriptor:
    """Loaded service provider.

    Attributes:
        class_name: Fully qualified provider class
        deferred: Registration deferred until a provided service is resolved
        provides: Services resolved through this provider (deferred providers only)
    """

    class_name: str
    deferred: bool = False
    provides: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.class_name:
            raise ValueError("class_name must not be empty")
        if not isinstance(self.provides, tuple):
            raise TypeError(f"provides must be tuple, got {type(self.provides).__name__}")
        if self.provides and not self.deferred:
            raise ValueError(f"eager provider '{self.class_name}' cannot declare provided services")
