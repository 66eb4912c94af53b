"""Model query builder.

Every attribute dimension (property, fillable, hidden, appended, readable,
writable, relationship) offers the same three forms:

    has_<aspect>(name)                       name present
    missing_<aspect>(name)                   name absent
    has_<aspect>_properties(names, match_all) all / any of names present

Example:
    models.has_fillable("email").missing_hidden("password").get()
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from introspect.domain.model.enums import ModelAspect
from introspect.domain.model.model import ModelDescriptor
from introspect.domain.model.relation import Relation
from introspect.domain.predicates.membership import as_targets, match_members
from introspect.domain.predicates.model_predicates import has_aspect, has_relationship_of_type
from introspect.presentation.api._filters import FilterBase, NegatedFilter, require_str
from introspect.presentation.api._query import ScopedQuery


@dataclass(frozen=True, slots=True)
class AspectFilter(FilterBase):
    """Model has name in one attribute dimension."""

    aspect: ModelAspect
    name: str

    @property
    def kind(self) -> str:
        return self.aspect.value

    def test(self, record: ModelDescriptor) -> bool:
        return has_aspect(record, self.aspect, self.name)

    def describe(self) -> str:
        return f"{self.aspect.value}({self.name})"


@dataclass(frozen=True, slots=True)
class AspectsFilter(FilterBase):
    """Model has all/any of names in one attribute dimension."""

    aspect: ModelAspect
    names: tuple[str, ...]
    match_all: bool = True

    @property
    def kind(self) -> str:
        return f"{self.aspect.value}_set"

    def test(self, record: ModelDescriptor) -> bool:
        return match_members(
            self.names,
            lambda name: has_aspect(record, self.aspect, name),
            match_all=self.match_all,
        )

    def describe(self) -> str:
        mode = "all" if self.match_all else "any"
        return f"{self.aspect.value}_{mode}({', '.join(self.names)})"


@dataclass(frozen=True, slots=True)
class MissingAspectsFilter(FilterBase):
    """Model lacks all/any of names in one attribute dimension.

    match_all=True: every name is missing. match_all=False: at least one is.
    """

    aspect: ModelAspect
    names: tuple[str, ...]
    match_all: bool = True

    @property
    def kind(self) -> str:
        return f"missing_{self.aspect.value}_set"

    def test(self, record: ModelDescriptor) -> bool:
        return match_members(
            self.names,
            lambda name: not has_aspect(record, self.aspect, name),
            match_all=self.match_all,
        )


@dataclass(frozen=True, slots=True)
class RelationTypeFilter(FilterBase):
    """Model declares a relationship of relation type (or subtype)."""

    relation: type[Relation]

    @property
    def kind(self) -> str:
        return "relationship_type"

    def test(self, record: ModelDescriptor) -> bool:
        return has_relationship_of_type(record, self.relation)

    def describe(self) -> str:
        return f"relationship_type({self.relation.__name__})"


@dataclass(frozen=True, slots=True)
class ModelQuery(ScopedQuery[ModelDescriptor]):
    """Fluent, immutable query over model descriptors.

    in_() restricts candidates to the listed model classes.
    """

    DOMAIN: ClassVar[str] = "models"

    def _in_scope(self, record: ModelDescriptor, scope: frozenset[str]) -> bool:
        """Model class is listed."""
        return record.class_name in scope

    # Shared forms

    def _has(self, aspect: ModelAspect, name: str) -> ModelQuery:
        return self._with_filter(AspectFilter(aspect=aspect, name=require_str(name, "name")))

    def _missing(self, aspect: ModelAspect, name: str) -> ModelQuery:
        positive = AspectFilter(aspect=aspect, name=require_str(name, "name"))
        return self._with_filter(NegatedFilter(inner=positive))

    def _has_all(self, aspect: ModelAspect, names: Iterable[str], match_all: bool) -> ModelQuery:
        targets = as_targets(names, "names")
        return self._with_filter(AspectsFilter(aspect=aspect, names=targets, match_all=match_all))

    # Properties

    def has_property(self, name: str) -> ModelQuery:
        """Filter models declaring property (any visibility)."""
        return self._has(ModelAspect.PROPERTY, name)

    def missing_property(self, name: str) -> ModelQuery:
        """Filter models not declaring property."""
        return self._missing(ModelAspect.PROPERTY, name)

    def has_properties(self, names: Iterable[str], match_all: bool = True) -> ModelQuery:
        """Filter models declaring all (or any) of properties.

        Args:
            names: Property names
            match_all: True = every property required, False = any one

        Returns:
            Filtered query. An empty list matches no model.
        """
        return self._has_all(ModelAspect.PROPERTY, names, match_all)

    def missing_properties(self, names: Iterable[str], match_all: bool = True) -> ModelQuery:
        """Filter models missing all (or any) of properties.

        Args:
            names: Property names
            match_all: True = every property missing, False = at least one missing

        Returns:
            Filtered query. An empty list matches no model.
        """
        targets = as_targets(names, "names")
        return self._with_filter(
            MissingAspectsFilter(aspect=ModelAspect.PROPERTY, names=targets, match_all=match_all)
        )

    # Fillable

    def has_fillable(self, name: str) -> ModelQuery:
        """Filter models where attribute is mass-assignable."""
        return self._has(ModelAspect.FILLABLE, name)

    def missing_fillable(self, name: str) -> ModelQuery:
        """Filter models where attribute is not mass-assignable."""
        return self._missing(ModelAspect.FILLABLE, name)

    def has_fillable_properties(self, names: Iterable[str], match_all: bool = True) -> ModelQuery:
        """Filter models by fillable names (all by default, any with match_all=False)."""
        return self._has_all(ModelAspect.FILLABLE, names, match_all)

    # Hidden

    def has_hidden(self, name: str) -> ModelQuery:
        """Filter models hiding attribute from serialization."""
        return self._has(ModelAspect.HIDDEN, name)

    def missing_hidden(self, name: str) -> ModelQuery:
        """Filter models not hiding attribute from serialization."""
        return self._missing(ModelAspect.HIDDEN, name)

    def has_hidden_properties(self, names: Iterable[str], match_all: bool = True) -> ModelQuery:
        """Filter models by hidden names (all by default, any with match_all=False)."""
        return self._has_all(ModelAspect.HIDDEN, names, match_all)

    # Appended

    def has_appended(self, name: str) -> ModelQuery:
        """Filter models appending computed attribute on serialization."""
        return self._has(ModelAspect.APPENDED, name)

    def missing_appended(self, name: str) -> ModelQuery:
        """Filter models not appending attribute on serialization."""
        return self._missing(ModelAspect.APPENDED, name)

    def has_appended_properties(self, names: Iterable[str], match_all: bool = True) -> ModelQuery:
        """Filter models by appended names (all by default, any with match_all=False)."""
        return self._has_all(ModelAspect.APPENDED, names, match_all)

    # Readable / writable

    def has_readable(self, name: str) -> ModelQuery:
        """Filter models where attribute can be read.

        Readable: fillable, public property, get<Studly>Attribute accessor,
        or a method named like the attribute carrying an Attribute marker.
        """
        return self._has(ModelAspect.READABLE, name)

    def missing_readable(self, name: str) -> ModelQuery:
        """Filter models where attribute cannot be read."""
        return self._missing(ModelAspect.READABLE, name)

    def has_readable_properties(self, names: Iterable[str], match_all: bool = True) -> ModelQuery:
        """Filter models by readable attributes (all by default, any with match_all=False)."""
        return self._has_all(ModelAspect.READABLE, names, match_all)

    def has_writable(self, name: str) -> ModelQuery:
        """Filter models where attribute can be written.

        Writable: fillable, public property, or set<Studly>Attribute mutator.
        """
        return self._has(ModelAspect.WRITABLE, name)

    def missing_writable(self, name: str) -> ModelQuery:
        """Filter models where attribute cannot be written."""
        return self._missing(ModelAspect.WRITABLE, name)

    def has_writable_properties(self, names: Iterable[str], match_all: bool = True) -> ModelQuery:
        """Filter models by writable attributes (all by default, any with match_all=False)."""
        return self._has_all(ModelAspect.WRITABLE, names, match_all)

    # Relationships

    def has_relationship(self, name: str) -> ModelQuery:
        """Filter models declaring relationship method.

        Relationship: public, non-static method returning a relation type.
        """
        return self._has(ModelAspect.RELATIONSHIP, name)

    def missing_relationship(self, name: str) -> ModelQuery:
        """Filter models not declaring relationship method."""
        return self._missing(ModelAspect.RELATIONSHIP, name)

    def has_relationship_of_type(self, relation_type: type[Relation]) -> ModelQuery:
        """Filter models declaring some relationship of relation type.

        Args:
            relation_type: Relation class (HasMany, BelongsTo, ...)

        Returns:
            Filtered query

        Raises:
            TypeError: If relation_type is not a Relation subclass
        """
        if not (isinstance(relation_type, type) and issubclass(relation_type, Relation)):
            raise TypeError(f"relation_type must be a Relation subclass, got {relation_type!r}")
        return self._with_filter(RelationTypeFilter(relation=relation_type))
