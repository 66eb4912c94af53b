"""Tests for presentation/api/traits.py and interfaces.py."""

import pytest

from introspect.domain.model.interface import InterfaceDescriptor
from introspect.domain.model.trait import TraitDescriptor
from introspect.infrastructure.providers.static import StaticProvider
from introspect.presentation.api.interfaces import InterfaceQuery
from introspect.presentation.api.traits import TraitQuery


class Post:
    """Class using traits."""


POST = f"{Post.__module__}.{Post.__qualname__}"

SOFT_DELETES = TraitDescriptor("app.concerns.SoftDeletes", used_by=(POST, "app.User"))
SEARCHABLE = TraitDescriptor("search.Searchable", used_by=("app.User",))
HAS_FACTORY = TraitDescriptor("app.concerns.HasFactory", used_by=(POST,))
UNUSED = TraitDescriptor("app.concerns.Unused")
TRAITS = (SOFT_DELETES, SEARCHABLE, HAS_FACTORY, UNUSED)

JSONABLE = InterfaceDescriptor("contracts.Jsonable", implemented_by=(POST,))
ARRAYABLE = InterfaceDescriptor("contracts.Arrayable", implemented_by=(POST, "app.User"))
QUEUEABLE = InterfaceDescriptor("queue.ShouldQueue", implemented_by=("app.jobs.Send",))
INTERFACES = (JSONABLE, ARRAYABLE, QUEUEABLE)


def traits() -> TraitQuery:
    return TraitQuery.create(StaticProvider(TRAITS))


def interfaces() -> InterfaceQuery:
    return InterfaceQuery.create(StaticProvider(INTERFACES))


class TestTraitQuery:
    """Trait filters."""

    def test_name_filters(self) -> None:
        assert traits().named("app.concerns.*").count() == 3
        assert traits().name_starts_with("search.").get() == (SEARCHABLE,)
        assert traits().name_ends_with("Factory").get() == (HAS_FACTORY,)
        assert traits().name_contains("Delete").get() == (SOFT_DELETES,)

    def test_used_by_class(self) -> None:
        assert traits().used_by(Post).get() == (SOFT_DELETES, HAS_FACTORY)

    def test_used_by_name(self) -> None:
        assert traits().used_by("app.User").get() == (SOFT_DELETES, SEARCHABLE)

    def test_in_keeps_traits_used_by_any_listed_class(self) -> None:
        assert traits().in_([Post, "app.Other"]).get() == (SOFT_DELETES, HAS_FACTORY)

    def test_in_empty_keeps_nothing(self) -> None:
        assert traits().in_([]).get() == ()

    def test_in_with_name_filter(self) -> None:
        query = traits().in_(["app.User"]).name_starts_with("app.")
        assert query.get() == (SOFT_DELETES,)

    def test_used_by_none_raises(self) -> None:
        with pytest.raises(TypeError, match="cls must not be None"):
            traits().used_by(None)  # type: ignore[arg-type]


class TestInterfaceQuery:
    """Interface filters."""

    def test_implemented_by(self) -> None:
        assert interfaces().implemented_by(Post).get() == (JSONABLE, ARRAYABLE)
        assert interfaces().implemented_by("app.User").get() == (ARRAYABLE,)

    def test_name_filters(self) -> None:
        assert interfaces().named("contracts.*").count() == 2
        assert interfaces().name_contains("Queue").get() == (QUEUEABLE,)

    def test_in(self) -> None:
        assert interfaces().in_(["app.jobs.Send"]).get() == (QUEUEABLE,)

    def test_or(self) -> None:
        query = interfaces().implemented_by("app.User").or_(lambda q: q.name_ends_with("Queue"))
        assert query.get() == (ARRAYABLE, QUEUEABLE)
