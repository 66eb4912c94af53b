"""Filter variants shared by all query builders.

Internal module - not part of public API.

A filter is a frozen dataclass carrying its captured parameters. It exposes:
    kind         registry key; a query holds at most one filter per kind
    accumulates  True = every registration is kept (no last-write-wins)
    test(r)      pure boolean test against one record
    prepare(p)   bind to the materialized population once per terminal call

Field-based filters read one named field of the record. A None field value
fails every positive test.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Protocol, Self

from introspect.domain.predicates.bindings import class_identifier
from introspect.presentation.api.patterns import CompiledPattern, compile_pattern, has_wildcard


class Filter[T](Protocol):
    """Structural type of every filter variant."""

    accumulates: ClassVar[bool]

    @property
    def kind(self) -> str: ...

    def test(self, record: T) -> bool: ...

    def prepare(self, population: Sequence[T]) -> Filter[T]: ...

    def describe(self) -> str: ...


class FilterBase:
    """Default prepare/describe for filter dataclasses."""

    __slots__ = ()

    accumulates: ClassVar[bool] = False

    def prepare(self, population: Sequence[Any]) -> Self:
        """Most filters do not depend on other records."""
        return self

    def describe(self) -> str:
        """Human-readable form: kind(param=value, ...)."""
        params = ", ".join(
            f"{f.name}={getattr(self, f.name)!s}" for f in fields(self) if f.name != "kind"
        )
        return f"{self.kind}({params})"


def field_value(record: Any, field: str) -> Any:
    """Read named field from record."""
    return getattr(record, field)


def require_str(value: Any, arg: str) -> str:
    """Reject None for required string argument. FAIL-FIRST."""
    if value is None:
        raise TypeError(f"{arg} must not be None")
    return value


def class_name_arg(value: type | str, arg: str) -> str:
    """Class identifier from class or its fully qualified name. FAIL-FIRST."""
    require_str(value, arg)
    return class_identifier(value) if isinstance(value, type) else value


@dataclass(frozen=True, slots=True)
class PatternFilter(FilterBase):
    """Field matches wildcard pattern."""

    kind: str
    field: str
    pattern: CompiledPattern

    def test(self, record: Any) -> bool:
        value = field_value(record, self.field)
        return value is not None and self.pattern.match(value)


@dataclass(frozen=True, slots=True)
class PrefixFilter(FilterBase):
    """Field starts with prefix.

    With wildcards=True a prefix containing * is matched as a whole-value
    wildcard pattern instead.
    """

    kind: str
    field: str
    prefix: str
    wildcard: CompiledPattern | None = None

    def test(self, record: Any) -> bool:
        value = field_value(record, self.field)
        if value is None:
            return False
        if self.wildcard is not None:
            return self.wildcard.match(value)
        return value.startswith(self.prefix)


def make_prefix_filter(
    kind: str,
    field: str,
    prefix: str,
    *,
    wildcards: bool = False,
) -> PrefixFilter:
    """Build prefix filter, routing * prefixes through the pattern matcher.

    Args:
        kind: Filter kind
        field: Record field
        prefix: Captured prefix
        wildcards: Whether this prefix filter supports wildcards

    Returns:
        PrefixFilter
    """
    if wildcards and has_wildcard(prefix):
        return PrefixFilter(kind=kind, field=field, prefix=prefix, wildcard=compile_pattern(prefix))
    return PrefixFilter(kind=kind, field=field, prefix=prefix)


@dataclass(frozen=True, slots=True)
class SuffixFilter(FilterBase):
    """Field ends with suffix (no wildcard expansion)."""

    kind: str
    field: str
    suffix: str

    def test(self, record: Any) -> bool:
        value = field_value(record, self.field)
        return value is not None and value.endswith(self.suffix)


@dataclass(frozen=True, slots=True)
class ContainsFilter(FilterBase):
    """Field contains substring (no wildcard expansion)."""

    kind: str
    field: str
    substring: str

    def test(self, record: Any) -> bool:
        value = field_value(record, self.field)
        return value is not None and self.substring in value


@dataclass(frozen=True, slots=True)
class EqualsFilter(FilterBase):
    """Field equals value exactly."""

    kind: str
    field: str
    value: Any

    def test(self, record: Any) -> bool:
        return field_value(record, self.field) == self.value


@dataclass(frozen=True, slots=True)
class MemberFilter(FilterBase):
    """Collection field contains value."""

    kind: str
    field: str
    value: Any

    def test(self, record: Any) -> bool:
        return self.value in field_value(record, self.field)


@dataclass(frozen=True, slots=True)
class FlagFilter(FilterBase):
    """Boolean field has expected truth value."""

    kind: str
    field: str
    expected: bool = True

    def test(self, record: Any) -> bool:
        return bool(field_value(record, self.field)) is self.expected


@dataclass(frozen=True, slots=True)
class NegatedFilter[T](FilterBase):
    """Logical negation of another filter, evaluated at query time."""

    inner: Filter[T]

    @property
    def kind(self) -> str:
        return f"not_{self.inner.kind}"

    def test(self, record: T) -> bool:
        return not self.inner.test(record)

    def prepare(self, population: Sequence[T]) -> NegatedFilter[T]:
        prepared = self.inner.prepare(population)
        if prepared is self.inner:
            return self
        return NegatedFilter(inner=prepared)

    def describe(self) -> str:
        return f"not {self.inner.describe()}"


@dataclass(frozen=True, slots=True)
class CustomFilter[T](FilterBase):
    """Caller-supplied predicate. Every registration is kept."""

    accumulates: ClassVar[bool] = True

    predicate: Callable[[T], bool]

    @property
    def kind(self) -> str:
        return "that"

    def test(self, record: T) -> bool:
        return bool(self.predicate(record))

    def describe(self) -> str:
        name = getattr(self.predicate, "__qualname__", None) or repr(self.predicate)
        return f"that({name})"
