import datetime

import pytest

from flyout.components import registry
from flyout.utils.html import RenderContext


@pytest.fixture
def render_context() -> RenderContext:
    return RenderContext()


@pytest.fixture
def frozen_now():
    """A fixed, timezone aware "now": 2024-03-15 14:30 UTC."""
    return datetime.datetime(2024, 3, 15, 14, 30, tzinfo=datetime.UTC)


@pytest.fixture
def clean_registry():
    registry._components.clear()
    registry.register_builtin_components()
    yield registry
    registry._components.clear()
    registry.register_builtin_components()
