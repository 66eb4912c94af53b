"""Model relation types.

Closed set of recognized relation kinds. A model method declaring one of
these (or a subclass) as its return type is a relationship.
"""

from __future__ import annotations


class Relation:
    """Base for all relation types."""


class HasOne(Relation):
    """One-to-one, foreign key on related model."""


class HasMany(Relation):
    """One-to-many, foreign key on related model."""


class BelongsTo(Relation):
    """Inverse of HasOne/HasMany, foreign key on this model."""


class BelongsToMany(Relation):
    """Many-to-many through pivot table."""


class MorphTo(Relation):
    """Polymorphic inverse."""


class MorphOne(Relation):
    """Polymorphic one-to-one."""


class MorphMany(Relation):
    """Polymorphic one-to-many."""


class MorphToMany(Relation):
    """Polymorphic many-to-many."""


class HasOneThrough(Relation):
    """One-to-one through intermediate model."""


class HasManyThrough(Relation):
    """One-to-many through intermediate model."""


# Bare Relation is not part of the set
RELATION_TYPES: tuple[type[Relation], ...] = (
    HasOne,
    HasMany,
    BelongsTo,
    BelongsToMany,
    MorphTo,
    MorphOne,
    MorphMany,
    MorphToMany,
    HasOneThrough,
    HasManyThrough,
)
