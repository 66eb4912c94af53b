"""Domain enumerations."""

from enum import Enum, auto


class OverwritePolicy(Enum):
    """What happens when a filter kind is set twice on one query."""

    ALLOW = auto()  # last write wins, silently
    WARN = auto()  # last write wins, warning logged
    STRICT = auto()  # FilterOverwriteError


class ModelAspect(Enum):
    """Attribute dimension a model filter inspects."""

    PROPERTY = "property"  # declared property, any visibility
    FILLABLE = "fillable"
    HIDDEN = "hidden"
    APPENDED = "appended"
    READABLE = "readable"  # fillable, public, or accessor
    WRITABLE = "writable"  # fillable, public, or mutator
    RELATIONSHIP = "relationship"
