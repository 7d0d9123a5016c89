"""
Configuration Module
"""

from events_intercept.config.base import BaseConfig
from events_intercept.config.interceptor import DEFAULT_MAX_INTERCEPTORS, InterceptorConfig

__all__ = [
    "BaseConfig",
    "InterceptorConfig",
    "DEFAULT_MAX_INTERCEPTORS",
]
