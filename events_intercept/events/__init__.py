"""Events package: base emitter, interceptor chain and in-place patching."""

from .emitter import BaseEmitter
from .interceptor import EventInterceptor, initialize_interceptors
from .lifecycle import LIFECYCLE_EVENTS
from .patch import PATCHED_METHODS, is_patched, monkey_patch

__all__ = [
    "BaseEmitter",
    "EventInterceptor",
    "initialize_interceptors",
    "LIFECYCLE_EVENTS",
    "PATCHED_METHODS",
    "is_patched",
    "monkey_patch",
]
