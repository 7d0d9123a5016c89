"""In-place patch: give an existing emitter instance the interceptor chain."""

from __future__ import annotations

import logging
import types
from typing import Any, TypeVar

from ..config import InterceptorConfig
from ..types import SupportsEvents
from .interceptor import EventInterceptor, initialize_interceptors

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=SupportsEvents)

PATCHED_METHODS = (
    "emit",
    "listeners",
    "intercept",
    "interceptors",
    "remove_interceptor",
    "remove_all_interceptors",
    "set_max_interceptors",
    "get_max_interceptors",
    "interceptor_count",
    "intercepted_event_names",
)


def is_patched(emitter: Any) -> bool:
    return (
        getattr(emitter, "_interceptors", None) is not None
        and getattr(emitter, "_base_emit", None) is not None
    )


def monkey_patch(emitter: E, config: InterceptorConfig | None = None) -> E:
    """
    Install the interceptor methods on one emitter instance.

    Only this instance changes; its class and other instances keep their
    behavior. Patching an already patched emitter keeps its interceptors
    and ceiling, and ``config`` is then ignored.

    Args:
        emitter: Any object with ``on``, ``emit``, ``listeners`` and ``remove_listener``
        config: Optional settings for a first-time patch

    Returns:
        The same emitter
    """
    if not isinstance(emitter, SupportsEvents):
        raise TypeError(f"cannot patch {type(emitter).__name__}: not an event emitter")

    base_emit = emitter.emit
    base_listeners = emitter.listeners

    for name in PATCHED_METHODS:
        setattr(emitter, name, types.MethodType(getattr(EventInterceptor, name), emitter))

    initialize_interceptors(emitter, base_emit, base_listeners, config)
    logger.debug("Patched %s with interceptor chain", type(emitter).__name__)
    return emitter
