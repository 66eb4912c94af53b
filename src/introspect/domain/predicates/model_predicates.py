"""Model matching rules.

Readable/writable resolution follows attribute access conventions:
fillable attributes and public properties are both readable and writable,
accessors make an attribute readable, mutators make it writable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from introspect.domain.model.enums import ModelAspect
from introspect.domain.model.relation import RELATION_TYPES, Relation
from introspect.domain.predicates.bindings import class_identifier

if TYPE_CHECKING:
    from introspect.domain.model.model import MethodInfo, ModelDescriptor

# Marker name fragment identifying attribute-style accessors
ACCESSOR_MARKER = "Attribute"

_RELATION_NAMES: frozenset[str] = frozenset(
    name for rel in RELATION_TYPES for name in (rel.__name__, class_identifier(rel))
)


def studly(name: str) -> str:
    """Convert snake_case to StudlyCase ("first_name" -> "FirstName")."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


def is_relation_type(declared: type | str | None) -> bool:
    """Check declared type is a recognized relation.

    Classes: exactly one of RELATION_TYPES or a subclass of one (nominal).
    Strings (unresolved annotations): short or qualified name of one of
    RELATION_TYPES.

    Args:
        declared: Declared return type

    Returns:
        True if relation type
    """
    if isinstance(declared, type):
        return any(declared is rel or issubclass(declared, rel) for rel in RELATION_TYPES)
    if isinstance(declared, str):
        return declared in _RELATION_NAMES
    return False


def has_property(model: ModelDescriptor, name: str) -> bool:
    """Property declared with any visibility."""
    return model.find_property(name) is not None


def has_fillable(model: ModelDescriptor, name: str) -> bool:
    """Attribute is mass-assignable."""
    return name in model.fillable


def has_hidden(model: ModelDescriptor, name: str) -> bool:
    """Attribute is hidden from serialization."""
    return name in model.hidden


def has_appended(model: ModelDescriptor, name: str) -> bool:
    """Attribute is appended on serialization."""
    return name in model.appends


def _has_public_property(model: ModelDescriptor, name: str) -> bool:
    prop = model.find_property(name)
    return prop is not None and prop.is_public


def has_readable(model: ModelDescriptor, name: str) -> bool:
    """Check attribute can be read.

    Readable when fillable, public property, legacy accessor
    (get<Studly>Attribute) or a method named like the attribute carrying
    an Attribute marker.
    """
    if has_fillable(model, name) or _has_public_property(model, name):
        return True
    if model.find_method(f"get{studly(name)}Attribute") is not None:
        return True
    method = model.find_method(name)
    return method is not None and any(ACCESSOR_MARKER in a for a in method.attributes)


def has_writable(model: ModelDescriptor, name: str) -> bool:
    """Check attribute can be written.

    Writable when fillable, public property or mutator (set<Studly>Attribute).
    """
    if has_fillable(model, name) or _has_public_property(model, name):
        return True
    return model.find_method(f"set{studly(name)}Attribute") is not None


def relationship_method(model: ModelDescriptor, name: str) -> MethodInfo | None:
    """Find relationship method.

    Relationship: public, non-static method whose return type is a relation.

    Args:
        model: Model to inspect
        name: Relationship (method) name

    Returns:
        MethodInfo or None if name is not a relationship
    """
    method = model.find_method(name)
    if method is None or not method.is_public or method.is_static:
        return None
    if not is_relation_type(method.return_type):
        return None
    return method


def has_relationship(model: ModelDescriptor, name: str) -> bool:
    """Model declares relationship with this name."""
    return relationship_method(model, name) is not None


def has_relationship_of_type(model: ModelDescriptor, relation: type[Relation]) -> bool:
    """Model declares some relationship of this relation type (or subtype).

    Relationships with unresolved (string) return types never match.
    """
    for method in model.methods:
        if relationship_method(model, method.name) is None:
            continue
        declared = method.return_type
        if isinstance(declared, type) and issubclass(declared, relation):
            return True
    return False


_ASPECT_TESTS = {
    ModelAspect.PROPERTY: has_property,
    ModelAspect.FILLABLE: has_fillable,
    ModelAspect.HIDDEN: has_hidden,
    ModelAspect.APPENDED: has_appended,
    ModelAspect.READABLE: has_readable,
    ModelAspect.WRITABLE: has_writable,
    ModelAspect.RELATIONSHIP: has_relationship,
}


def has_aspect(model: ModelDescriptor, aspect: ModelAspect, name: str) -> bool:
    """Dispatch single-name model check by aspect.

    Args:
        model: Model to inspect
        aspect: Dimension to check
        name: Attribute, property or relationship name

    Returns:
        True if model has name in that dimension
    """
    return _ASPECT_TESTS[aspect](model, name)
