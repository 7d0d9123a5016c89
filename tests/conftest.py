"""
Pytest Configuration and Fixtures
"""

import pytest

from events_intercept import BaseEmitter, EventEmitter, patch

EMITTER_FACTORIES = {
    "events-intercept EventEmitter": EventEmitter,
    "patched BaseEmitter": lambda: patch(BaseEmitter()),
}


@pytest.fixture(params=list(EMITTER_FACTORIES))
def emitter_factory(request):
    """Builds emitters through both application strategies."""
    return EMITTER_FACTORIES[request.param]


@pytest.fixture
def emitter(emitter_factory):
    """Returns a fresh intercepting emitter."""
    return emitter_factory()
