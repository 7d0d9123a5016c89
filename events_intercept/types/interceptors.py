"""Interceptor and emitter types."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Protocol, runtime_checkable

EventName = Hashable

Next = Callable[..., bool]
"""Continuation: ``next(err=None, *args)``."""

Interceptor = Callable[..., Any]
Listener = Callable[..., Any]

NEW_LISTENER = "new_listener"
REMOVE_LISTENER = "remove_listener"
NEW_INTERCEPTOR = "new_interceptor"
REMOVE_INTERCEPTOR = "remove_interceptor"
ERROR = "error"


class InterceptorList(list):
    """Ordered interceptors for one event, plus the one-shot leak flag."""

    warned: bool = False


@runtime_checkable
class SupportsEvents(Protocol):
    def on(self, event_name: EventName, listener: Listener) -> Any: ...
    def emit(self, event_name: EventName, *args: Any) -> bool: ...
    def listeners(self, event_name: EventName) -> list[Listener]: ...
    def remove_listener(self, event_name: EventName, listener: Listener) -> Any: ...


@runtime_checkable
class InterceptedEmitter(SupportsEvents, Protocol):
    _interceptors: dict[str, InterceptorList]
    _max_interceptors: float

    def intercept(self, event_name: EventName, interceptor: Interceptor) -> Any: ...
    def interceptors(self, event_name: EventName) -> list[Interceptor]: ...
    def remove_interceptor(self, event_name: EventName, interceptor: Interceptor) -> Any: ...
    def remove_all_interceptors(self, event_name: EventName | None = None) -> Any: ...
    def set_max_interceptors(self, n: float) -> Any: ...
