"""Synchronous publish/subscribe emitter with lifecycle notifications."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any

from ..errors import UnhandledErrorEvent
from ..types import ERROR, NEW_LISTENER, REMOVE_LISTENER, EventName, Listener

logger = logging.getLogger(__name__)


class _OnceWrapper:
    """Removes itself from ``emitter`` before the first call reaches ``listener``."""

    def __init__(self, emitter: BaseEmitter, event_name: EventName, listener: Listener) -> None:
        self.emitter = emitter
        self.event_name = event_name
        self.listener = listener

    def __call__(self, *args: Any) -> Any:
        self.emitter.remove_listener(self.event_name, self)
        return self.listener(*args)


def _unwrap(listener: Listener) -> Listener:
    return listener.listener if isinstance(listener, _OnceWrapper) else listener


class BaseEmitter:
    """
    Named listener lists dispatched synchronously in registration order.

    ``"new_listener"`` and ``"remove_listener"`` are only emitted when something
    is listening for them. Emitting ``"error"`` with no listener raises.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventName, list[Listener]] = defaultdict(list)

    def on(self, event_name: EventName, listener: Listener) -> BaseEmitter:
        if not callable(listener):
            raise TypeError("listener must be callable")
        if self._handlers.get(NEW_LISTENER):
            self.emit(NEW_LISTENER, event_name, _unwrap(listener))
        self._handlers[event_name].append(listener)
        return self

    add_listener = on

    def once(self, event_name: EventName, listener: Listener) -> BaseEmitter:
        if not callable(listener):
            raise TypeError("listener must be callable")
        return self.on(event_name, _OnceWrapper(self, event_name, listener))

    def remove_listener(self, event_name: EventName, listener: Listener) -> BaseEmitter:
        handlers = self._handlers.get(event_name)
        if not handlers:
            return self

        for position in range(len(handlers) - 1, -1, -1):
            entry = handlers[position]
            if entry == listener or _unwrap(entry) == listener:
                break
        else:
            return self

        del handlers[position]
        if not handlers:
            del self._handlers[event_name]

        if self._handlers.get(REMOVE_LISTENER):
            self.emit(REMOVE_LISTENER, event_name, _unwrap(entry))
        return self

    off = remove_listener

    def remove_all_listeners(self, event_name: EventName | None = None) -> BaseEmitter:
        if event_name is not None:
            for listener in reversed(list(self._handlers.get(event_name, ()))):
                self.remove_listener(event_name, listener)
            return self

        for name in list(self._handlers):
            if name != REMOVE_LISTENER:
                self.remove_all_listeners(name)
        self.remove_all_listeners(REMOVE_LISTENER)
        self._handlers.clear()
        return self

    def emit(self, event_name: EventName, *args: Any) -> bool:
        handlers = self._handlers.get(event_name)
        if not handlers:
            if event_name == ERROR:
                err = args[0] if args else None
                logger.debug("No listener for %r, raising %r", ERROR, err)
                if isinstance(err, BaseException):
                    raise err
                raise UnhandledErrorEvent(err)
            return False

        for handler in list(handlers):
            handler(*args)
        return True

    def listeners(self, event_name: EventName) -> list[Listener]:
        return [_unwrap(listener) for listener in self._handlers.get(event_name, ())]

    def listener_count(self, event_name: EventName) -> int:
        return len(self._handlers.get(event_name, ()))

    def event_names(self) -> list[EventName]:
        return list(self._handlers)
