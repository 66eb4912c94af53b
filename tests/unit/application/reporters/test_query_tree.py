"""Tests for application/reporters/query_tree.py."""

from rich.tree import Tree

from introspect.application.reporters.query_tree import build_tree, explain_query
from tests.factories import make_route, model_query, route_query

ROUTES = (make_route("/admin", name="admin.home", middleware=("auth",)),)


class TestExplainQuery:
    """Tests for explain_query text output."""

    def test_empty_query(self) -> None:
        text = explain_query(route_query(*ROUTES))

        assert text.splitlines()[0] == "routes query"
        assert "(matches every record)" in text

    def test_filters_in_registration_order(self) -> None:
        query = route_query(*ROUTES).uses_middleware("auth").named("admin.*")

        lines = explain_query(query).splitlines()

        assert "middleware(middleware=auth)" in lines[1]
        assert "name(field=name, pattern=admin.*)" in lines[2]

    def test_or_branch_nested(self) -> None:
        query = route_query(*ROUTES).uses_middleware("auth").or_(lambda q: q.named("public.*"))

        text = explain_query(query)

        assert "or" in text.splitlines()[2]
        assert "name(field=name, pattern=public.*)" in text.splitlines()[3]
        assert "(matches every record)" not in text

    def test_scope_listed_sorted(self) -> None:
        query = model_query().in_(["app.Post", "app.Comment"])

        text = explain_query(query)

        assert "in app.Comment, app.Post" in text
        assert "(matches every record)" not in text

    def test_empty_scope(self) -> None:
        assert "in (empty)" in explain_query(model_query().in_([]))

    def test_markup_in_values_escaped(self) -> None:
        query = route_query(*ROUTES).named("[bold]x")

        assert "pattern=[bold]x" in explain_query(query)

    def test_no_color_codes_by_default(self) -> None:
        query = route_query(*ROUTES).uses_middleware("auth")

        assert "\x1b[" not in explain_query(query)

    def test_does_not_fetch(self) -> None:
        query = route_query(*ROUTES).that(lambda r: 1 / 0)  # type: ignore[arg-type]

        assert "that(" in explain_query(query)

    def test_query_method_delegates(self) -> None:
        query = route_query(*ROUTES).named("admin.*")

        assert query.explain() == explain_query(query)


class TestBuildTree:
    """Tests for build_tree structure."""

    def test_one_node_per_filter(self) -> None:
        query = route_query(*ROUTES).uses_middleware("auth").named("admin.*")

        tree = build_tree(query)

        assert isinstance(tree, Tree)
        assert len(tree.children) == 2

    def test_branch_children(self) -> None:
        query = (
            route_query(*ROUTES)
            .or_(lambda q: q.named("a").uses_method("GET"))
            .or_(lambda q: q.named("b"))
        )

        tree = build_tree(query)

        assert len(tree.children) == 2
        assert len(tree.children[0].children) == 2
        assert len(tree.children[1].children) == 1
