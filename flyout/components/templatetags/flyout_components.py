from django import template

from flyout.components import registry
from flyout.components.alert import Alert, AlertType
from flyout.components.data_table import DataTable
from flyout.components.empty_state import EmptyState
from flyout.components.heading import Heading, HeadingTag
from flyout.components.stats_card import StatsCard
from flyout.components.status_indicator import ServiceStatus, StatusIndicator
from flyout.components.timeline import Timeline

register = template.Library()


@register.simple_tag
def flyout_component(type_name, *args, **kwargs):
    """
    Renders any registered component by its type name.
    Usage: {% flyout_component "alert" "Saved" type="success" %}
    """
    return registry.render_component(type_name, *args, **kwargs)


@register.simple_tag
def heading(text, tag=HeadingTag.h3, **kwargs):
    return Heading(text, tag, **kwargs).render()


@register.simple_tag
def stats_card(**kwargs):
    return StatsCard(**kwargs).render()


@register.simple_tag
def timeline(events, **kwargs):
    return Timeline(events=events, **kwargs).render()


@register.simple_tag
def data_table(data, **kwargs):
    return DataTable(data, **kwargs).render()


@register.simple_tag
def alert(message, type=AlertType.info, **kwargs):
    return Alert(message, type=type, **kwargs).render()


@register.simple_tag
def empty_state(**kwargs):
    return EmptyState(**kwargs).render()


@register.simple_tag
def status_indicator(status=ServiceStatus.operational, **kwargs):
    return StatusIndicator(status=status, **kwargs).render()
