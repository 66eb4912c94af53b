"""Interface query builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from introspect.domain.model.interface import InterfaceDescriptor
from introspect.presentation.api._named import NamedTypeQuery


@dataclass(frozen=True, slots=True)
class InterfaceQuery(NamedTypeQuery[InterfaceDescriptor]):
    """Fluent, immutable query over declared interfaces."""

    DOMAIN: ClassVar[str] = "interfaces"
    USERS_FIELD: ClassVar[str] = "implemented_by"

    def implemented_by(self, cls: type | str) -> InterfaceQuery:
        """Filter interfaces implemented by class."""
        return self._with_user(cls)
