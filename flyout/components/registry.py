"""
Lookup of component classes by type name.

Lets templates and configuration refer to components as "stats_card" or "alert"
instead of importing the classes.
"""
import logging

from flyout.components.alert import Alert
from flyout.components.base import Component
from flyout.components.data_table import DataTable
from flyout.components.empty_state import EmptyState
from flyout.components.heading import Heading
from flyout.components.stats_card import StatsCard
from flyout.components.status_indicator import StatusIndicator
from flyout.components.timeline import Timeline
from flyout.utils.exceptions import ComponentConfigError

logger = logging.getLogger(__name__)

BUILTIN_COMPONENTS = {
    "heading": Heading,
    "stats_card": StatsCard,
    "timeline": Timeline,
    "data_table": DataTable,
    "alert": Alert,
    "empty_state": EmptyState,
    "status_indicator": StatusIndicator,
}

_components = {}


def register(type_name, component_class):
    if not (isinstance(component_class, type) and issubclass(component_class, Component)):
        raise ComponentConfigError(f'Component "{type_name}" must be a Component subclass, got {component_class!r}')

    existing = _components.get(type_name)
    if existing is not None and existing is not component_class:
        logger.warning(
            'Component type "%s" is already registered to %s, replacing it with %s',
            type_name,
            existing.__name__,
            component_class.__name__,
        )
    _components[type_name] = component_class


def unregister(type_name):
    _components.pop(type_name, None)


def register_builtin_components():
    for type_name, component_class in BUILTIN_COMPONENTS.items():
        register(type_name, component_class)


def get(type_name):
    try:
        return _components[type_name]
    except KeyError:
        raise ComponentConfigError(f'Unknown component type "{type_name}"') from None


def registered_types():
    return dict(_components)


def render_component(type_name, *args, **config):
    return get(type_name)(*args, **config).render()
