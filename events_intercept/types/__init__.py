"""Core type definitions — re-exported from sub-modules."""

from .interceptors import (
    ERROR, NEW_INTERCEPTOR, NEW_LISTENER, REMOVE_INTERCEPTOR, REMOVE_LISTENER,
    EventName, InterceptedEmitter, Interceptor, InterceptorList, Listener, Next, SupportsEvents,
)

__all__ = [
    "EventName", "Interceptor", "InterceptorList", "Listener", "Next",
    "SupportsEvents", "InterceptedEmitter",
    "NEW_LISTENER", "REMOVE_LISTENER", "NEW_INTERCEPTOR", "REMOVE_INTERCEPTOR", "ERROR",
]
