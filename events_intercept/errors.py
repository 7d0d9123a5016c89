"""Structured error hierarchy for the interceptor engine."""

from __future__ import annotations

from typing import Any


class InterceptError(Exception):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class UnhandledErrorEvent(InterceptError):
    """Raised when ``"error"`` is emitted with a non-exception payload and no listener."""

    def __init__(self, payload: Any) -> None:
        super().__init__("UNHANDLED_ERROR_EVENT", f"Unhandled error. ({payload!r})")
        self.payload = payload


class InterceptorLeakWarning(RuntimeWarning):
    def __init__(self, event_name: Any, count: int, limit: float) -> None:
        super().__init__(
            f"possible events-intercept memory leak detected. {count} {event_name} "
            f"interceptors added. Use emitter.set_max_interceptors() to increase limit."
        )
        self.event_name = event_name
        self.count = count
        self.limit = limit
