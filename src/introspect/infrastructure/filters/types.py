"""Predicate type alias.

Python 3.12+ PEP 695 type alias syntax.
Predicate function: takes a record, returns True to include.
"""

from collections.abc import Callable

type Predicate[T] = Callable[[T], bool]
