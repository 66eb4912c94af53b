"""Composite predicates: AND, OR composition."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from introspect.infrastructure.filters.types import Predicate


def all_of[T](*predicates: Predicate[T]) -> Predicate[T]:
    """Create predicate that requires ALL predicates to pass (AND).

    Evaluation stops at the first failing predicate.

    Args:
        *predicates: Predicates to compose.

    Returns:
        Predicate that returns True only if all predicates return True.
        Empty predicates = always True.
    """

    def _predicate(record: T) -> bool:
        return all(p(record) for p in predicates)

    return _predicate


def any_of[T](*predicates: Predicate[T]) -> Predicate[T]:
    """Create predicate that requires ANY predicate to pass (OR).

    Args:
        *predicates: Predicates to compose.

    Returns:
        Predicate that returns True if any predicate returns True.
        Empty predicates = always False.
    """

    def _predicate(record: T) -> bool:
        return any(p(record) for p in predicates)

    return _predicate
