"""
Interceptor chain: per-event interceptors that run before an event's listeners.

Each interceptor receives the current arguments plus a continuation::

    def interceptor(value, next):
        next(None, transform(value))    # continue the chain
        next(error)                     # abort, emits "error" instead

When the last interceptor continues, the listeners run with the final
arguments. Everything is synchronous; an interceptor that never calls its
continuation stalls the chain for that emission.
"""

from __future__ import annotations

import logging
import math
import numbers
import warnings
from typing import Any, Callable

from ..config import DEFAULT_MAX_INTERCEPTORS, InterceptorConfig
from ..errors import InterceptorLeakWarning
from ..types import (
    ERROR,
    NEW_INTERCEPTOR,
    REMOVE_INTERCEPTOR,
    EventName,
    Interceptor,
    InterceptorList,
    Listener,
)
from .emitter import BaseEmitter
from .lifecycle import fix_listeners, hide_lifecycle_noop

logger = logging.getLogger(__name__)


def _check_interceptor(interceptor: Any) -> None:
    if not callable(interceptor):
        raise TypeError("interceptor must be callable")


def initialize_interceptors(
    emitter: Any,
    base_emit: Callable[..., bool],
    base_listeners: Callable[[EventName], list[Listener]],
    config: InterceptorConfig | None = None,
) -> None:
    """
    Seed interceptor state on an emitter and apply the lifecycle shim.

    Shared by ``EventInterceptor.__init__`` and ``monkey_patch``. Existing
    state is left alone, so running it twice on one emitter keeps its
    interceptors, its ceiling and its original base methods.

    Args:
        emitter: Emitter receiving the state
        base_emit: Unintercepted emit used once a chain completes
        base_listeners: Unfiltered listener lookup
        config: Optional settings; the class default ceiling is used without one
    """
    if getattr(emitter, "_base_emit", None) is None:
        emitter._base_emit = base_emit
        emitter._base_listeners = base_listeners
    if getattr(emitter, "_interceptors", None) is None:
        emitter._interceptors = {}
    if getattr(emitter, "_max_interceptors", None) is None:
        emitter._max_interceptors = (
            config.max_interceptors
            if config is not None
            else EventInterceptor.default_max_interceptors
        )

    fix_listeners(emitter, emitter._base_listeners)


class EventInterceptor(BaseEmitter):
    """
    Emitter with an interceptor chain in front of every event.

    Usage::

        emitter = EventInterceptor()
        emitter.intercept("data", lambda value, next: next(None, value.strip()))
        emitter.on("data", print)
        emitter.emit("data", "  hello  ")   # prints "hello"
    """

    default_max_interceptors: float = DEFAULT_MAX_INTERCEPTORS

    _interceptors: dict[str, InterceptorList]
    _max_interceptors: float

    def __init__(self, config: InterceptorConfig | None = None) -> None:
        super().__init__()
        initialize_interceptors(self, super().emit, super().listeners, config)

    # ==================== chain executor ====================

    def emit(self, event_name: EventName, *args: Any) -> bool:
        registered = self._interceptors.get(str(event_name))
        if not registered:
            return self._base_emit(event_name, *args)

        chain = tuple(registered)
        completed = 0
        outcome = False

        def next_(err: Any = None, *results: Any) -> bool:
            nonlocal completed, outcome
            if err:
                logger.debug("Interceptor chain for %r aborted: %r", event_name, err)
                self.emit(ERROR, err)
                return False
            if completed == len(chain):
                outcome = self._base_emit(event_name, *results)
                return outcome
            completed += 1
            chain[completed - 1](*results, next_)
            return outcome

        next_(None, *args)
        return outcome

    def listeners(self, event_name: EventName) -> list[Listener]:
        return hide_lifecycle_noop(event_name, self._base_listeners(event_name))

    # ==================== registry ====================

    def intercept(self, event_name: EventName, interceptor: Interceptor) -> EventInterceptor:
        _check_interceptor(interceptor)

        self.emit(NEW_INTERCEPTOR, event_name, interceptor)

        key = str(event_name)
        registered = self._interceptors.get(key)
        if registered is None:
            registered = self._interceptors[key] = InterceptorList()
        registered.append(interceptor)

        limit = self._max_interceptors
        if not registered.warned and limit > 0 and len(registered) > limit:
            registered.warned = True
            logger.debug("Interceptor ceiling %s exceeded for %r", limit, event_name)
            warnings.warn(InterceptorLeakWarning(event_name, len(registered), limit), stacklevel=2)

        return self

    def interceptors(self, event_name: EventName) -> list[Interceptor]:
        return list(self._interceptors.get(str(event_name), ()))

    def interceptor_count(self, event_name: EventName) -> int:
        return len(self._interceptors.get(str(event_name), ()))

    def intercepted_event_names(self) -> list[str]:
        return list(self._interceptors)

    def remove_interceptor(
        self, event_name: EventName, interceptor: Interceptor
    ) -> EventInterceptor:
        _check_interceptor(interceptor)

        key = str(event_name)
        registered = self._interceptors.get(key)
        if not registered:
            return self

        for position in range(len(registered) - 1, -1, -1):
            if registered[position] == interceptor:
                break
        else:
            return self

        if len(registered) == 1:
            del self._interceptors[key]
        else:
            del registered[position]

        self.emit(REMOVE_INTERCEPTOR, event_name, interceptor)
        return self

    def remove_all_interceptors(self, event_name: EventName | None = None) -> EventInterceptor:
        if not self._interceptors:
            return self

        if event_name is None:
            for key in list(self._interceptors):
                if key != REMOVE_INTERCEPTOR:
                    self.remove_all_interceptors(key)
            # remove_interceptor's own list goes last
            self.remove_all_interceptors(REMOVE_INTERCEPTOR)
            self._interceptors.clear()
            return self

        key = str(event_name)
        registered = self._interceptors.get(key)
        if registered:
            for interceptor in reversed(list(registered)):
                self.remove_interceptor(event_name, interceptor)
            self._interceptors.pop(key, None)
        return self

    # ==================== ceiling ====================

    def set_max_interceptors(self, n: float) -> EventInterceptor:
        if isinstance(n, bool) or not isinstance(n, numbers.Real) or math.isnan(n) or n < 0:
            raise TypeError("n must be a non-negative number")
        self._max_interceptors = n
        return self

    def get_max_interceptors(self) -> float:
        return self._max_interceptors
