"""Query explanation: Query -> rich tree rendered to string."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

if TYPE_CHECKING:
    from introspect.presentation.api._query import Query


def explain_query(query: Query[Any], *, color: bool = False, width: int = 100) -> str:
    """Render query structure as text tree.

    Describes the query only (filters, scope, OR branches), never results.
    Output is str, not print(). Caller decides destination.

    Example output:
        routes query
        ├── middleware(middleware=auth)
        └── or
            └── name_prefix(field=name, prefix=public., wildcard=None)

    Args:
        query: Query to explain
        color: Emit terminal color codes
        width: Console width

    Returns:
        Rendered tree
    """
    output = StringIO()
    console = Console(
        file=output,
        force_terminal=color,
        no_color=not color,
        width=width,
        highlight=False,
    )
    console.print(build_tree(query))
    return output.getvalue()


def build_tree(query: Query[Any]) -> Tree:
    """Build rich tree for query, recursing into OR branches."""
    tree = Tree(f"[bold]{query.DOMAIN} query[/bold]")
    _fill(tree, query)
    return tree


def _fill(node: Tree, query: Query[Any]) -> None:
    if query.scope is not None:
        names = ", ".join(escape(name) for name in sorted(query.scope)) or "(empty)"
        node.add(f"[cyan]in[/cyan] {names}")

    for flt in query.filters:
        node.add(escape(flt.describe()))

    if not query.filters and not query.branches and query.scope is None:
        node.add("[dim](matches every record)[/dim]")

    for branch in query.branches:
        _fill(node.add("[yellow]or[/yellow]"), branch)
