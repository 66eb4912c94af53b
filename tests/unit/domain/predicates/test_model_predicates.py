"""Tests for domain/predicates/model_predicates.py."""

import pytest

from introspect.domain.model.enums import ModelAspect
from introspect.domain.model.model import MethodInfo, PropertyInfo
from introspect.domain.model.relation import BelongsTo, HasMany, HasOne, Relation
from introspect.domain.predicates.model_predicates import (
    has_aspect,
    has_readable,
    has_relationship,
    has_relationship_of_type,
    has_writable,
    is_relation_type,
    relationship_method,
    studly,
)
from tests.factories import make_model


class PinnedComments(HasMany):
    """Custom relation subclass."""


USER = make_model(
    "app.models.User",
    properties=[PropertyInfo("nickname", is_public=True), "secret"],
    fillable=("email",),
    hidden=("password",),
    appends=("avatar_url",),
    methods=[
        MethodInfo("getFullNameAttribute"),
        MethodInfo("setPasswordAttribute"),
        MethodInfo("initials", attributes=("Attribute",)),
        MethodInfo("posts", return_type=HasMany),
        MethodInfo("team", return_type="BelongsTo"),
        MethodInfo("pinned", return_type=PinnedComments),
        MethodInfo("profile", return_type=HasOne, is_public=False),
        MethodInfo("query", return_type=HasMany, is_static=True),
        MethodInfo("base", return_type=Relation),
        MethodInfo("label", return_type=str),
    ],
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [("first_name", "FirstName"), ("email", "Email"), ("a_b_c", "ABC")],
)
def test_studly(name: str, expected: str) -> None:
    assert studly(name) == expected


class TestReadableWritable:
    """Attribute access resolution."""

    @pytest.mark.parametrize("name", ["email", "nickname", "full_name", "initials"])
    def test_readable(self, name: str) -> None:
        assert has_readable(USER, name)

    @pytest.mark.parametrize("name", ["secret", "password", "avatar_url"])
    def test_not_readable(self, name: str) -> None:
        assert not has_readable(USER, name)

    @pytest.mark.parametrize("name", ["email", "nickname", "password"])
    def test_writable(self, name: str) -> None:
        assert has_writable(USER, name)

    @pytest.mark.parametrize("name", ["full_name", "initials", "secret"])
    def test_not_writable(self, name: str) -> None:
        assert not has_writable(USER, name)


class TestRelationships:
    """Relationship detection."""

    def test_is_relation_type(self) -> None:
        assert is_relation_type(HasMany)
        assert is_relation_type(PinnedComments)
        assert is_relation_type("BelongsTo")
        assert is_relation_type("introspect.domain.model.relation.BelongsTo")
        assert not is_relation_type(Relation)
        assert not is_relation_type("Relation")
        assert not is_relation_type(str)
        assert not is_relation_type(None)

    @pytest.mark.parametrize("name", ["posts", "team", "pinned"])
    def test_relationship(self, name: str) -> None:
        assert has_relationship(USER, name)

    @pytest.mark.parametrize("name", ["profile", "query", "base", "label", "missing"])
    def test_not_relationship(self, name: str) -> None:
        assert relationship_method(USER, name) is None

    def test_of_type(self) -> None:
        assert has_relationship_of_type(USER, HasMany)
        assert has_relationship_of_type(USER, PinnedComments)
        assert has_relationship_of_type(USER, Relation)

    def test_unresolved_annotation_never_matches_type(self) -> None:
        assert not has_relationship_of_type(USER, BelongsTo)

    def test_non_public_relation_ignored(self) -> None:
        assert not has_relationship_of_type(USER, HasOne)


class TestHasAspect:
    """Aspect dispatch."""

    @pytest.mark.parametrize(
        ("aspect", "name"),
        [
            (ModelAspect.PROPERTY, "secret"),
            (ModelAspect.FILLABLE, "email"),
            (ModelAspect.HIDDEN, "password"),
            (ModelAspect.APPENDED, "avatar_url"),
            (ModelAspect.READABLE, "full_name"),
            (ModelAspect.WRITABLE, "password"),
            (ModelAspect.RELATIONSHIP, "posts"),
        ],
    )
    def test_dispatch(self, aspect: ModelAspect, name: str) -> None:
        assert has_aspect(USER, aspect, name)
        assert not has_aspect(USER, aspect, "unknown")
