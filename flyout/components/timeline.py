import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from django.conf import settings
from django.utils.html import format_html
from django.utils.safestring import mark_safe
from django.utils.timezone import now

from flyout.components.base import Component, IconRendererMixin
from flyout.utils.datetime import DATE_FORMAT, TIME_FORMAT, relative_date_label
from flyout.utils.html import build_classes, join_html, sanitize_html_class

logger = logging.getLogger(__name__)

ORDER_STATUS_ICONS = {
    "pending": "clock",
    "processing": "update",
    "shipped": "airplane",
    "delivered": "yes-alt",
    "completed": "yes",
    "refunded": "undo",
    "cancelled": "no-alt",
}


@dataclass(frozen=True)
class TimelineEvent:
    title: str = ""
    description: str | None = None
    date: Any = None  # datetime, date or a date string
    icon: str = "marker"
    type: str = "default"  # default, success, info, warning, error
    user: str | None = None
    meta: dict = field(default_factory=dict)


EVENT_FIELDS = {event_field.name for event_field in dataclasses.fields(TimelineEvent)}


def normalize_event(event):
    """
    Turn a string, mapping or TimelineEvent into a TimelineEvent.

    A string becomes the event title. Mapping keys that are not event fields are kept
    in the event meta. Anything else returns None.
    """
    if isinstance(event, TimelineEvent):
        return event
    if isinstance(event, str):
        return TimelineEvent(title=event)
    if isinstance(event, Mapping):
        values = {key: value for key, value in event.items() if key in EVENT_FIELDS}
        extra = {key: value for key, value in event.items() if key not in EVENT_FIELDS}
        meta = values.get("meta") or {}
        if not isinstance(meta, Mapping):
            meta = {"meta": meta}
        values["meta"] = {**meta, **extra}
        return TimelineEvent(**values)
    logger.warning("Ignoring timeline event of type %s", type(event).__name__)
    return None


@dataclass(frozen=True)
class TimelineConfig:
    id: str = ""
    events: tuple = ()
    compact: bool = False
    class_name: str = ""
    show_connector: bool = True
    show_icons: bool = True
    date_format: str = ""  # Django date format, defaults to FLYOUT_TIMELINE_DATE_FORMAT
    time_format: str = ""  # defaults to FLYOUT_TIMELINE_TIME_FORMAT


class Timeline(IconRendererMixin, Component):
    """
    A vertical list of dated events.

    Event dates on the current day render as "Today at <time>", the previous day as
    "Yesterday at <time>" and anything older with the configured date format.
    """

    config_class = TimelineConfig
    id_prefix = "timeline"

    def __init__(self, config=None, **kwargs):
        super().__init__(config, **kwargs)
        events = tuple(filter(None, (normalize_event(event) for event in self.config.events or ())))
        self.config = dataclasses.replace(self.config, events=events)

    def add_event(self, title, description=None, **meta):
        """Return a new timeline with an event appended, dated now unless a date is given."""
        event = normalize_event({"title": title, "description": description, "date": now(), **meta})
        return self._replace(events=self.config.events + (event,))

    @classmethod
    def customer_journey(cls, journey, **kwargs):
        timeline = cls(**kwargs)
        for step in journey:
            timeline = timeline.add_event(
                step["title"],
                step.get("description"),
                date=step.get("date") or now(),
                icon=step.get("icon", "marker"),
                type=step.get("type", "info"),
            )
        return timeline

    @classmethod
    def order_status(cls, statuses, **kwargs):
        timeline = cls(**kwargs)
        for status in statuses:
            status_key = str(status.get("status") or "pending").lower()
            timeline = timeline.add_event(
                status.get("title") or status.get("status"),
                status.get("note"),
                date=status.get("date"),
                icon=ORDER_STATUS_ICONS.get(status_key, "marker"),
                type=status.get("type", "info"),
                user=status.get("user"),
            )
        return timeline

    @property
    def date_format(self):
        return self.config.date_format or getattr(settings, "FLYOUT_TIMELINE_DATE_FORMAT", DATE_FORMAT)

    @property
    def time_format(self):
        return self.config.time_format or getattr(settings, "FLYOUT_TIMELINE_TIME_FORMAT", TIME_FORMAT)

    def render(self):
        events = [event for event in self.config.events if event.title]
        if not events:
            return ""

        classes = build_classes(
            ["wp-flyout-timeline", "compact" if self.config.compact else "", self.config.class_name]
        )
        parts = []
        if self.config.show_connector:
            parts.append(mark_safe('<div class="timeline-connector"></div>'))
        last = len(events) - 1
        parts.extend(self.render_event(event, is_last=index == last) for index, event in enumerate(events))

        return format_html(
            '<div id="{}" class="{}">{}</div>',
            self.context.attr(self.config.id),
            self.context.attr(classes),
            join_html(parts),
        )

    def render_event(self, event, is_last=False):
        classes = build_classes(
            [
                "timeline-item",
                f"timeline-item-{sanitize_html_class(event.type, 'default')}",
                "last-item" if is_last else "",
            ]
        )
        badge = self.render_icon(event.icon) if self.config.show_icons else ""

        content = []
        if event.date:
            date_label = self.context.text(self.format_date(event.date))
            content.append(format_html('<div class="timeline-date">{}</div>', date_label))
        content.append(format_html('<h4 class="timeline-title">{}</h4>', self.context.text(event.title)))
        if event.description:
            content.append(
                format_html('<p class="timeline-description">{}</p>', self.context.rich_text(event.description))
            )
        meta = self.render_meta(event)
        if meta:
            content.append(format_html('<div class="timeline-meta">{}</div>', meta))

        return format_html(
            '<div class="{}"><div class="timeline-badge">{}</div><div class="timeline-content">{}</div></div>',
            self.context.attr(classes),
            badge,
            join_html(content),
        )

    def render_meta(self, event):
        parts = []
        if event.user:
            by_user = self.translate("By %(user)s") % {"user": event.user}
            parts.append(format_html('<span class="timeline-user">{}</span>', self.context.text(by_user)))
        for label, value in event.meta.items():
            parts.append(
                format_html(
                    '<span class="timeline-meta-item"><span class="meta-label">{}:</span> '
                    '<span class="meta-value">{}</span></span>',
                    self.context.text(label),
                    self.context.text(value),
                )
            )
        return join_html(parts)

    def format_date(self, value):
        return relative_date_label(value, self.date_format, self.time_format)
