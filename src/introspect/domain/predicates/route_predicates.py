"""Route matching rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from introspect.domain.predicates.bindings import parse_controller
from introspect.domain.predicates.membership import match_members
from introspect.domain.predicates.normalize import middleware_base_name

if TYPE_CHECKING:
    from introspect.domain.model.route import RouteDescriptor


def uses_controller(route: RouteDescriptor, controller: str, method: str | None) -> bool:
    """Check route controller binding.

    Binding is normalized first ("Cls@method" or (cls, method)).
    Method is compared only when given.

    Args:
        route: Route to check
        controller: Controller class identifier
        method: Controller method, None = any method

    Returns:
        True if binding targets controller (and method)
    """
    binding = parse_controller(route.controller)
    if binding is None or binding.target != controller:
        return False
    return method is None or binding.member == method


def uses_middleware(route: RouteDescriptor, middleware: str) -> bool:
    """Check route has middleware.

    Compares the base name of each assigned token, so "throttle" matches
    "throttle:60,1" while "throttle:60,1" matches no token.

    Args:
        route: Route to check
        middleware: Middleware name without parameters

    Returns:
        True if some assigned token has this base name
    """
    return any(middleware_base_name(token) == middleware for token in route.middleware)


def uses_middlewares(
    route: RouteDescriptor,
    middlewares: tuple[str, ...],
    *,
    match_all: bool,
) -> bool:
    """Check route has all/any of middlewares. Empty list never matches."""
    return match_members(middlewares, lambda m: uses_middleware(route, m), match_all=match_all)
