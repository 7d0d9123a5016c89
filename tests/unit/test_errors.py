"""
Error Hierarchy Unit Tests
"""

from events_intercept import InterceptError, InterceptorLeakWarning, UnhandledErrorEvent


class TestInterceptError:
    """InterceptError"""

    def test_fields(self):
        err = InterceptError("CODE", "message")

        assert str(err) == "message"
        assert err.code == "CODE"
        assert err.message == "message"

    def test_unhandled_error_event(self):
        err = UnhandledErrorEvent({"reason": "bad"})

        assert isinstance(err, InterceptError)
        assert err.code == "UNHANDLED_ERROR_EVENT"
        assert err.payload == {"reason": "bad"}


class TestWarnings:
    """InterceptorLeakWarning"""

    def test_is_runtime_warning(self):
        warning = InterceptorLeakWarning("test", 11, 10)

        assert isinstance(warning, RuntimeWarning)
        assert (warning.event_name, warning.count, warning.limit) == ("test", 11, 10)
        assert "set_max_interceptors" in str(warning)
