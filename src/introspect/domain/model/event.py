"""Event descriptor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from introspect.domain.predicates.bindings import listener_name

# Listener as registered with the dispatcher:
#   "app.listeners.SendWelcome"          class name
#   ("app.listeners.SendWelcome", "handle") name/method pair
#   (SendWelcome, "handle") or (instance, "handle")
#   SendWelcome                            class
#   instance                               object with __call__/handle
#   function or lambda                     closure
type Listener = Any


@dataclass(frozen=True, slots=True)
class EventDescriptor:
    """Dispatchable event with its registered listeners.

    Attributes:
        name: Event name or event class name
        listeners: Registered listeners in any supported shape
    """

    name: str
    listeners: tuple[Listener, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("event name must not be empty")
        if not isinstance(self.listeners, tuple):
            raise TypeError(f"listeners must be tuple, got {type(self.listeners).__name__}")

    def listener_names(self) -> tuple[str, ...]:
        """Listeners normalized to class names ("Closure" for functions)."""
        return tuple(listener_name(listener) for listener in self.listeners)

    @property
    def has_listeners(self) -> bool:
        """At least one listener is registered."""
        return bool(self.listeners)
