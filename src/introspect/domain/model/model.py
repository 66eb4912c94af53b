"""Model descriptor and its members."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class PropertyInfo:
    """Declared model property.

    Attributes:
        name: Property name
        is_public: Publicly accessible
    """

    name: str
    is_public: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("property name must not be empty")


@dataclass(frozen=True, slots=True)
class MethodInfo:
    """Declared model method.

    Attributes:
        name: Method name
        is_public: Publicly accessible
        is_static: Static/class-level method
        return_type: Declared return type. A class for resolved annotations,
            a string for unresolved ones, None when not annotated.
        attributes: Names of attributes/markers attached to the method
    """

    name: str
    is_public: bool = True
    is_static: bool = False
    return_type: type | str | None = None
    attributes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("method name must not be empty")


@dataclass(frozen=True, slots=True)
class ModelDescriptor:
    """Persistence model class.

    Attributes:
        class_name: Fully qualified class name
        properties: Declared properties
        fillable: Mass-assignable attribute names
        hidden: Attribute names hidden from serialization
        appends: Computed attribute names appended on serialization
        methods: Declared methods
    """

    class_name: str
    properties: tuple[PropertyInfo, ...] = ()
    fillable: tuple[str, ...] = ()
    hidden: tuple[str, ...] = ()
    appends: tuple[str, ...] = ()
    methods: tuple[MethodInfo, ...] = ()
    _methods_by_name: Mapping[str, MethodInfo] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.class_name:
            raise ValueError("class_name must not be empty")
        for name in ("properties", "fillable", "hidden", "appends", "methods"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                raise TypeError(f"{name} must be tuple, got {type(value).__name__}")
        object.__setattr__(self, "_methods_by_name", {m.name: m for m in self.methods})

    def find_property(self, name: str) -> PropertyInfo | None:
        """Find declared property by name."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def find_method(self, name: str) -> MethodInfo | None:
        """Find declared method by name."""
        return self._methods_by_name.get(name)
