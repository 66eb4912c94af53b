"""Middleware registration descriptor."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MiddlewareDescriptor:
    """Registered middleware.

    Attributes:
        name: Alias, or class name for middleware registered without alias
        class_name: Fully qualified middleware class
        groups: Names of middleware groups containing this middleware
        is_global: Runs on every request
        used_by_routes: Assigned to at least one route
    """

    name: str
    class_name: str
    groups: tuple[str, ...] = ()
    is_global: bool = False
    used_by_routes: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("middleware name must not be empty")
        if not self.class_name:
            raise ValueError("class_name must not be empty")
        if not isinstance(self.groups, tuple):
            raise TypeError(f"groups must be tuple, got {type(self.groups).__name__}")
