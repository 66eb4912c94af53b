"""Domain model: descriptor records and configuration."""

from introspect.domain.model.configuration import DEFAULT_CONFIG, QueryConfig
from introspect.domain.model.enums import ModelAspect, OverwritePolicy
from introspect.domain.model.event import EventDescriptor, Listener
from introspect.domain.model.interface import InterfaceDescriptor
from introspect.domain.model.job import SHOULD_BE_ENCRYPTED, SHOULD_BE_UNIQUE, JobDescriptor
from introspect.domain.model.middleware import MiddlewareDescriptor
from introspect.domain.model.model import MethodInfo, ModelDescriptor, PropertyInfo
from introspect.domain.model.provider import ProviderDescriptor
from introspect.domain.model.relation import (
    RELATION_TYPES,
    BelongsTo,
    BelongsToMany,
    HasMany,
    HasManyThrough,
    HasOne,
    HasOneThrough,
    MorphMany,
    MorphOne,
    MorphTo,
    MorphToMany,
    Relation,
)
from introspect.domain.model.route import ControllerAction, RouteDescriptor
from introspect.domain.model.trait import TraitDescriptor
from introspect.domain.model.view import ViewDescriptor

__all__ = [
    # Configuration
    "DEFAULT_CONFIG",
    "ModelAspect",
    "OverwritePolicy",
    "QueryConfig",
    # Descriptors
    "ControllerAction",
    "EventDescriptor",
    "InterfaceDescriptor",
    "JobDescriptor",
    "Listener",
    "MethodInfo",
    "MiddlewareDescriptor",
    "ModelDescriptor",
    "PropertyInfo",
    "ProviderDescriptor",
    "RouteDescriptor",
    "TraitDescriptor",
    "ViewDescriptor",
    # Job contracts
    "SHOULD_BE_ENCRYPTED",
    "SHOULD_BE_UNIQUE",
    # Relations
    "RELATION_TYPES",
    "BelongsTo",
    "BelongsToMany",
    "HasMany",
    "HasManyThrough",
    "HasOne",
    "HasOneThrough",
    "MorphMany",
    "MorphOne",
    "MorphTo",
    "MorphToMany",
    "Relation",
]
