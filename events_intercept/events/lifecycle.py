"""Lifecycle shim keeping the listener lifecycle events always observed."""

from __future__ import annotations

from typing import Any, Callable

from ..types import NEW_LISTENER, REMOVE_LISTENER, EventName, Listener, SupportsEvents

LIFECYCLE_EVENTS = (NEW_LISTENER, REMOVE_LISTENER)


def lifecycle_noop(*args: Any) -> None:
    """Placeholder listener that makes the base emitter report lifecycle events."""


def fix_listeners(
    emitter: SupportsEvents, base_listeners: Callable[[EventName], list[Listener]]
) -> None:
    # the base emitter skips lifecycle notifications nobody listens to, which
    # would also skip interceptors registered for them
    for event_name in LIFECYCLE_EVENTS:
        if lifecycle_noop not in base_listeners(event_name):
            emitter.on(event_name, lifecycle_noop)


def hide_lifecycle_noop(event_name: EventName, found: list[Listener]) -> list[Listener]:
    if event_name not in LIFECYCLE_EVENTS:
        return found
    visible = list(found)
    if lifecycle_noop in visible:
        visible.remove(lifecycle_noop)
    return visible
