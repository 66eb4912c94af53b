"""Stateless predicate composition.

Predicates are pure functions: Predicate[T] = Callable[[T], bool]
True = include record, False = exclude record.

Usage:
    from introspect.infrastructure.filters import all_of, any_of

    flt = all_of(is_named, any_of(is_global, is_grouped))
    matched = [r for r in records if flt(r)]
"""

from introspect.infrastructure.filters.composite import all_of, any_of
from introspect.infrastructure.filters.types import Predicate

__all__ = [
    "Predicate",
    "all_of",
    "any_of",
]
