"""Domain predicates: pure matching rules over descriptor records."""

from introspect.domain.predicates.bindings import (
    CLOSURE_LISTENER,
    ControllerBinding,
    class_identifier,
    listener_name,
    parse_controller,
)
from introspect.domain.predicates.membership import as_targets, match_members
from introspect.domain.predicates.model_predicates import (
    has_appended,
    has_aspect,
    has_fillable,
    has_hidden,
    has_property,
    has_readable,
    has_relationship,
    has_relationship_of_type,
    has_writable,
    is_relation_type,
)
from introspect.domain.predicates.normalize import (
    middleware_base_name,
    normalize_http_method,
    normalize_path,
)
from introspect.domain.predicates.route_predicates import (
    uses_controller,
    uses_middleware,
    uses_middlewares,
)

__all__ = [
    # Bindings
    "CLOSURE_LISTENER",
    "ControllerBinding",
    "class_identifier",
    "listener_name",
    "parse_controller",
    # Membership
    "as_targets",
    "match_members",
    # Normalization
    "middleware_base_name",
    "normalize_http_method",
    "normalize_path",
    # Model predicates
    "has_appended",
    "has_aspect",
    "has_fillable",
    "has_hidden",
    "has_property",
    "has_readable",
    "has_relationship",
    "has_relationship_of_type",
    "has_writable",
    "is_relation_type",
    # Route predicates
    "uses_controller",
    "uses_middleware",
    "uses_middlewares",
]
