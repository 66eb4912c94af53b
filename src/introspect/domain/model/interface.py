"""Interface descriptor."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InterfaceDescriptor:
    """Declared interface.

    Attributes:
        name: Fully qualified interface name
        implemented_by: Classes implementing this interface
    """

    name: str
    implemented_by: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("interface name must not be empty")
        if not isinstance(self.implemented_by, tuple):
            raise TypeError(
                f"implemented_by must be tuple, got {type(self.implemented_by).__name__}"
            )
