"""Fluent query API over introspected metadata.

Public exports:
    Introspect: Entry point
    RouteQuery/ModelQuery/ViewQuery/MiddlewareQuery/EventQuery: Query builders
    JobQuery/ProviderQuery/TraitQuery/InterfaceQuery: Query builders
    compile_pattern: Pattern compilation
    CompiledPattern: Compiled pattern type
"""

from introspect.presentation.api.dsl import Introspect
from introspect.presentation.api.events import EventQuery
from introspect.presentation.api.interfaces import InterfaceQuery
from introspect.presentation.api.jobs import JobQuery
from introspect.presentation.api.middleware import MiddlewareQuery
from introspect.presentation.api.models import ModelQuery
from introspect.presentation.api.patterns import (
    CompiledPattern,
    compile_pattern,
)
from introspect.presentation.api.providers import ProviderQuery
from introspect.presentation.api.routes import RouteQuery
from introspect.presentation.api.traits import TraitQuery
from introspect.presentation.api.views import ViewQuery

__all__ = [
    "CompiledPattern",
    "EventQuery",
    "InterfaceQuery",
    "Introspect",
    "JobQuery",
    "MiddlewareQuery",
    "ModelQuery",
    "ProviderQuery",
    "RouteQuery",
    "TraitQuery",
    "ViewQuery",
    "compile_pattern",
]
