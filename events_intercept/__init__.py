"""
events-intercept - interceptor chains for synchronous event emitters
=====================================================================

Interceptors run before an event's listeners, may rewrite its arguments
or veto it, and pass control on by calling a continuation.

```python
from events_intercept import EventEmitter

emitter = EventEmitter()
emitter.intercept("aaaa", lambda arg, done: done(None, "intercepted " + arg))
emitter.on("aaaa", print)
emitter.emit("aaaa", "myData")   # prints "intercepted myData"
```

An existing emitter instance can be upgraded in place with ``patch()``.
"""

from events_intercept.config import DEFAULT_MAX_INTERCEPTORS, InterceptorConfig
from events_intercept.errors import InterceptError, InterceptorLeakWarning, UnhandledErrorEvent
from events_intercept.events import BaseEmitter, EventInterceptor, is_patched, monkey_patch
from events_intercept.types import (
    ERROR,
    NEW_INTERCEPTOR,
    NEW_LISTENER,
    REMOVE_INTERCEPTOR,
    REMOVE_LISTENER,
    InterceptedEmitter,
    Interceptor,
    InterceptorList,
    Next,
    SupportsEvents,
)

# aliases
EventEmitter = EventInterceptor
patch = monkey_patch

__all__ = [
    "BaseEmitter",
    "EventInterceptor",
    "EventEmitter",
    "monkey_patch",
    "patch",
    "is_patched",
    "InterceptorConfig",
    "DEFAULT_MAX_INTERCEPTORS",
    "InterceptError",
    "InterceptorLeakWarning",
    "UnhandledErrorEvent",
    "Interceptor",
    "InterceptorList",
    "Next",
    "SupportsEvents",
    "InterceptedEmitter",
    "NEW_LISTENER",
    "REMOVE_LISTENER",
    "NEW_INTERCEPTOR",
    "REMOVE_INTERCEPTOR",
    "ERROR",
]
