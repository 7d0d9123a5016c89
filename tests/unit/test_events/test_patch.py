"""
In-place Patch Unit Tests
"""

from unittest.mock import Mock

import pytest

from events_intercept import (
    BaseEmitter,
    EventInterceptor,
    InterceptedEmitter,
    InterceptorConfig,
    is_patched,
    monkey_patch,
    patch,
)
from events_intercept.events.lifecycle import lifecycle_noop


class TestMonkeyPatch:
    """monkey_patch()"""

    def test_returns_same_instance(self):
        emitter = BaseEmitter()

        assert monkey_patch(emitter) is emitter
        assert patch is monkey_patch

    def test_patched_emitter_satisfies_protocol(self):
        emitter = patch(BaseEmitter())

        assert isinstance(emitter, InterceptedEmitter)
        assert is_patched(emitter)
        assert not is_patched(BaseEmitter())

    def test_seeds_defaults(self):
        emitter = patch(BaseEmitter())

        assert emitter._interceptors == {}
        assert emitter.get_max_interceptors() == EventInterceptor.default_max_interceptors

    def test_uses_config(self):
        emitter = patch(BaseEmitter(), InterceptorConfig(max_interceptors=3))

        assert emitter.get_max_interceptors() == 3

    def test_other_instances_unaffected(self):
        patched = patch(BaseEmitter())
        plain = BaseEmitter()
        interceptor = Mock()
        patched.intercept("test", interceptor)

        assert not hasattr(plain, "intercept")
        assert not hasattr(BaseEmitter, "intercept")
        assert plain.listeners("new_listener") == []
        assert plain.emit("test") is False
        interceptor.assert_not_called()

    def test_patching_twice_is_idempotent(self):
        emitter = patch(BaseEmitter())
        interceptor = Mock()
        emitter.intercept("test", interceptor).set_max_interceptors(4)

        patch(emitter, InterceptorConfig(max_interceptors=50))

        assert emitter.interceptors("test") == [interceptor]
        assert emitter.get_max_interceptors() == 4
        assert emitter._base_listeners("new_listener") == [lifecycle_noop]
        assert emitter._base_listeners("remove_listener") == [lifecycle_noop]

    def test_patching_twice_keeps_chain_working(self):
        emitter = patch(BaseEmitter())
        handler = Mock()
        emitter.on("test", handler).intercept("test", lambda arg, done: done(None, arg + 1))

        patch(emitter)
        emitter.emit("test", 1)

        handler.assert_called_once_with(2)

    def test_patching_builtin_emitter(self):
        emitter = EventInterceptor()
        interceptor = Mock()
        emitter.intercept("test", interceptor)

        patch(emitter)

        assert emitter.interceptors("test") == [interceptor]
        assert emitter.listeners("new_listener") == []

    def test_rejects_non_emitters(self):
        with pytest.raises(TypeError):
            monkey_patch(object())

    def test_patches_duck_typed_emitter(self):
        class MinimalEmitter:
            def __init__(self):
                self.handlers = {}

            def on(self, event_name, listener):
                self.handlers.setdefault(event_name, []).append(listener)
                return self

            def emit(self, event_name, *args):
                handlers = list(self.handlers.get(event_name, ()))
                for handler in handlers:
                    handler(*args)
                return bool(handlers)

            def listeners(self, event_name):
                return list(self.handlers.get(event_name, ()))

            def remove_listener(self, event_name, listener):
                self.handlers.get(event_name, []).remove(listener)
                return self

        emitter = patch(MinimalEmitter())
        handler = Mock()
        emitter.on("test", handler)
        emitter.intercept("test", lambda arg, done: done(None, arg.upper()))

        assert emitter.emit("test", "value") is True
        handler.assert_called_once_with("VALUE")
        assert emitter.listeners("new_listener") == []


class TestEventInterceptorConstruction:
    """EventInterceptor()"""

    def test_default_ceiling_is_read_at_construction(self, monkeypatch):
        monkeypatch.setattr(EventInterceptor, "default_max_interceptors", 2)
        first = EventInterceptor()
        monkeypatch.setattr(EventInterceptor, "default_max_interceptors", 7)
        second = EventInterceptor()

        assert first.get_max_interceptors() == 2
        assert second.get_max_interceptors() == 7

    def test_ceiling_is_per_instance(self):
        first = EventInterceptor()
        second = EventInterceptor()

        first.set_max_interceptors(1)

        assert second.get_max_interceptors() == 10

    def test_config(self):
        emitter = EventInterceptor(InterceptorConfig(max_interceptors=0))

        assert emitter.get_max_interceptors() == 0
