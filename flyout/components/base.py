import copy
import dataclasses
import logging
import uuid
from collections.abc import Mapping

from flyout.utils.exceptions import ComponentConfigError, is_strict_config
from flyout.utils.formatting import EMPTY_TEXT, format_boolean, format_value, is_empty_value
from flyout.utils.html import build_attributes, build_data_attributes, get_render_context, render_icon

logger = logging.getLogger(__name__)

# keys accepted in config mappings in place of the dataclass field name
CONFIG_ALIASES = {"class": "class_name"}


def build_config(config_class, config=None, overrides=None):
    """
    Apply config and keyword overrides on top of the defaults of config_class.

    config may be an instance of config_class or a mapping. Keys that are not fields
    of config_class raise ComponentConfigError.
    """
    if config is None:
        values = {}
    elif isinstance(config, config_class):
        values = {field.name: getattr(config, field.name) for field in dataclasses.fields(config)}
    elif isinstance(config, Mapping):
        values = dict(config)
    else:
        raise ComponentConfigError(
            f"{config_class.__name__} expects a mapping or {config_class.__name__}, got {type(config).__name__}"
        )
    values.update(overrides or {})
    values = {CONFIG_ALIASES.get(key, key): value for key, value in values.items()}

    known = {field.name for field in dataclasses.fields(config_class)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ComponentConfigError(f"Unknown {config_class.__name__} option(s): {', '.join(unknown)}")
    return config_class(**values)


def coerce_choice(component, field, value, choices, default):
    """
    Return value as a member of the choices class.

    Unknown values fall back to default with a warning, or raise ComponentConfigError
    when FLYOUT_STRICT_CONFIG is enabled.
    """
    if value in choices.values:
        return choices(value)
    message = f"{component} received unknown {field} {value!r}"
    if is_strict_config():
        raise ComponentConfigError(message)
    logger.warning("%s, using %r", message, str(default))
    return choices(default)


class Component:
    """
    Base class for all components.

    Subclasses set config_class to a frozen dataclass holding their options and
    implement render(). When id_prefix is set and no id is configured, an id of the
    form "<id_prefix>-<uuid4>" is generated.
    """

    config_class = None
    id_prefix = None

    def __init__(self, config=None, *, context=None, **overrides):
        self.config = build_config(self.config_class, config, overrides)
        if self.id_prefix and not self.config.id:
            self.config = dataclasses.replace(self.config, id=f"{self.id_prefix}-{uuid.uuid4()}")
        self.context = context or get_render_context()

    def render(self):
        raise NotImplementedError

    def __str__(self):
        return self.render()

    def __html__(self):
        return self.render()

    def _replace(self, **changes):
        """Return a copy of this component with the given config fields changed."""
        clone = copy.copy(self)
        clone.config = dataclasses.replace(self.config, **changes)
        return clone

    def translate(self, message):
        return self.context.translate(message)


class HtmlAttributesMixin:
    def build_attributes(self, attrs):
        return build_attributes(attrs, context=self.context)

    def build_data_attributes(self, data):
        return build_data_attributes(data, context=self.context)


class EmptyValueFormatterMixin:
    def format_value(self, value, empty_text=EMPTY_TEXT):
        return format_value(value, empty_text)

    def format_boolean(self, value, yes_text="", no_text=""):
        return format_boolean(value, yes_text, no_text)

    def is_empty_value(self, value):
        return is_empty_value(value)


class IconRendererMixin:
    def render_icon(self, icon, classes=()):
        return render_icon(icon, classes, context=self.context)
