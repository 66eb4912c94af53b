"""View template descriptor."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ViewDescriptor:
    """Template view.

    Attributes:
        name: Dotted view name, optionally namespaced ("mail::welcome")
        extends: Parent layout name, None if view extends nothing
        includes: Names of views this view includes
    """

    name: str
    extends: str | None = None
    includes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("view name must not be empty")
        if not isinstance(self.includes, tuple):
            raise TypeError(f"includes must be tuple, got {type(self.includes).__name__}")
