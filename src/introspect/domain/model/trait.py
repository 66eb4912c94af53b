"""Trait (mixin) descriptor."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TraitDescriptor:
    """Declared trait.

    Attributes:
        name: Fully qualified trait name
        used_by: Classes using this trait, directly or through parents/other traits
    """

    name: str
    used_by: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("trait name must not be empty")
        if not isinstance(self.used_by, tuple):
            raise TypeError(f"used_by must be tuple, got {type(self.used_by).__name__}")
