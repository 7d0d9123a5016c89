"""
Interceptor Configuration

Per-emitter settings read once at construction (or patch) time.
"""

import math

from pydantic import Field, StrictFloat, StrictInt, field_validator

from events_intercept.config.base import BaseConfig

DEFAULT_MAX_INTERCEPTORS = 10


class InterceptorConfig(BaseConfig):
    """
    Interceptor engine configuration

    Attributes:
        max_interceptors: Leak-warning ceiling per event. ``0`` disables the check.
    """

    max_interceptors: StrictInt | StrictFloat = Field(
        default=DEFAULT_MAX_INTERCEPTORS,
        description="Interceptors per event before a leak warning is issued",
    )

    @field_validator("max_interceptors")
    @classmethod
    def _non_negative(cls, value):
        if math.isnan(value) or value < 0:
            raise ValueError("max_interceptors must be a non-negative number")
        return value
