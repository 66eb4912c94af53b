"""Trait (mixin) query builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from introspect.domain.model.trait import TraitDescriptor
from introspect.presentation.api._named import NamedTypeQuery


@dataclass(frozen=True, slots=True)
class TraitQuery(NamedTypeQuery[TraitDescriptor]):
    """Fluent, immutable query over declared traits.

    Example:
        traits.in_([Post, Comment]).name_ends_with("Searchable").get()
    """

    DOMAIN: ClassVar[str] = "traits"
    USERS_FIELD: ClassVar[str] = "used_by"

    def used_by(self, cls: type | str) -> TraitQuery:
        """Filter traits used by class (directly or through parents/traits)."""
        return self._with_user(cls)
