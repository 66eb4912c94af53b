"""Binding shapes: controller actions and event listeners.

A binding can be registered in several shapes. These functions reduce
every shape to one canonical form before comparison.
"""

from __future__ import annotations

import types
from dataclasses import dataclass
from typing import Any

CLOSURE_LISTENER = "Closure"

_FUNCTION_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.LambdaType,
)


@dataclass(frozen=True, slots=True)
class ControllerBinding:
    """Canonical controller binding.

    Attributes:
        target: Controller class identifier
        member: Method name, None for invokable controllers
    """

    target: str
    member: str | None = None


def parse_controller(action: Any) -> ControllerBinding | None:
    """Normalize a route's controller action.

    Accepts "Cls@method", "Cls", (cls,) and (cls, method), where cls is a
    class name or a class. Anything else (None, callables) has no
    controller binding.

    Args:
        action: Controller action as registered on the route

    Returns:
        ControllerBinding or None
    """
    if isinstance(action, str):
        target, sep, member = action.partition("@")
        return ControllerBinding(target=target, member=member if sep else None)
    if isinstance(action, (tuple, list)) and action:
        target = action[0]
        if isinstance(target, type):
            target = class_identifier(target)
        if not isinstance(target, str):
            return None
        member = action[1] if len(action) > 1 else None
        return ControllerBinding(target=target, member=member)
    return None


def class_identifier(cls: type) -> str:
    """Fully qualified class identifier ("pkg.module.Class")."""
    module = cls.__module__
    if module == "builtins":
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def listener_name(listener: Any) -> str:
    """Normalize event listener to its class name.

    Shapes:
        "pkg.Listener"            -> "pkg.Listener"
        ("pkg.Listener", "handle") -> "pkg.Listener"
        (ListenerClass, "handle")  -> "pkg.ListenerClass"
        (instance, "handle")       -> class of instance
        ListenerClass              -> "pkg.ListenerClass"
        function / lambda          -> "Closure"
        instance                   -> class of instance

    Args:
        listener: Listener in any supported shape

    Returns:
        Class identifier or CLOSURE_LISTENER
    """
    if isinstance(listener, str):
        return listener
    if isinstance(listener, (tuple, list)):
        if not listener:
            return CLOSURE_LISTENER
        first = listener[0]
        if isinstance(first, str):
            return first
        if isinstance(first, type):
            return class_identifier(first)
        return class_identifier(type(first))
    if isinstance(listener, _FUNCTION_TYPES):
        return CLOSURE_LISTENER
    if isinstance(listener, type):
        return class_identifier(listener)
    return class_identifier(type(listener))
