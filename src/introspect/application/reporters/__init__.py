"""Reporters: render query structure as text."""

from introspect.application.reporters.query_tree import build_tree, explain_query

__all__ = ["build_tree", "explain_query"]
