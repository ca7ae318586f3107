from dataclasses import dataclass
from typing import Any

from django.utils.html import format_html

from flyout.components.base import Component, EmptyValueFormatterMixin, IconRendererMixin
from flyout.utils.formatting import format_number, to_float
from flyout.utils.html import build_classes, join_html


@dataclass(frozen=True)
class StatsCardConfig:
    id: str = ""
    title: str = ""
    value: Any = ""
    subtitle: str = ""
    icon: str = ""
    trend: Any = None  # signed percentage, None hides the trend
    trend_label: str = ""
    color: str = ""  # a colour name used as a class suffix, or a "#hex" value
    link: str = ""
    link_text: str = "View Details"
    class_name: str = ""
    footer: str = ""


def trend_direction(trend):
    """Map a signed trend to its (state, icon) pair."""
    trend = to_float(trend)
    if trend > 0:
        return "up", "arrow-up-alt"
    if trend < 0:
        return "down", "arrow-down-alt"
    return "neutral", "minus"


class StatsCard(IconRendererMixin, EmptyValueFormatterMixin, Component):
    """A metric tile with an optional trend, icon, link and footer."""

    config_class = StatsCardConfig
    id_prefix = "stats-card"

    def render(self):
        config = self.config
        if self.is_empty_value(config.title) and self.is_empty_value(config.value):
            return ""

        parts = []
        if config.icon:
            parts.append(format_html('<div class="stats-card-icon">{}</div>', self.render_icon(config.icon)))
        parts.append(format_html('<div class="stats-card-content">{}</div>', self.render_content()))
        if config.link or config.footer:
            parts.append(format_html('<div class="stats-card-footer">{}</div>', self.render_footer()))

        return format_html(
            '<div id="{}" class="{}"{}>{}</div>',
            self.context.attr(config.id),
            self.context.attr(self.get_classes()),
            self.get_style(),
            join_html(parts),
        )

    def render_content(self):
        config = self.config
        parts = []
        if config.title:
            parts.append(format_html('<h3 class="stats-card-title">{}</h3>', self.context.text(config.title)))
        trend = self.render_trend() if config.trend is not None else ""
        parts.append(
            format_html('<div class="stats-card-value">{}{}</div>', self.context.rich_text(config.value), trend)
        )
        if config.subtitle:
            parts.append(format_html('<div class="stats-card-subtitle">{}</div>', self.context.text(config.subtitle)))
        return join_html(parts)

    def render_trend(self):
        trend = to_float(self.config.trend)
        direction, icon = trend_direction(trend)
        label = ""
        if self.config.trend_label:
            label = format_html('<span class="trend-label">{}</span>', self.context.text(self.config.trend_label))
        return format_html(
            '<span class="stats-card-trend trend-{}">{}<span class="trend-value">{}</span>{}</span>',
            self.context.attr(direction),
            self.render_icon(icon),
            self.context.text(f"{format_number(abs(trend))}%"),
            label,
        )

    def render_footer(self):
        config = self.config
        parts = []
        if config.link:
            parts.append(
                format_html(
                    '<a href="{}" class="stats-card-link">{}{}</a>',
                    self.context.url(config.link),
                    self.context.text(config.link_text),
                    self.render_icon("arrow-right-alt"),
                )
            )
        if config.footer:
            parts.append(
                format_html('<div class="stats-card-footer-text">{}</div>', self.context.rich_text(config.footer))
            )
        return join_html(parts)

    def get_classes(self):
        config = self.config
        classes = ["stats-card"]
        if config.color and not self.has_custom_color():
            classes.append(f"stats-card-{config.color}")
        if config.link:
            classes.append("has-link")
        classes.append(config.class_name)
        return build_classes(classes)

    def has_custom_color(self):
        return str(self.config.color).startswith("#")

    def get_style(self):
        if self.config.color and self.has_custom_color():
            return format_html(' style="--stats-card-color: {}"', self.context.attr(self.config.color))
        return ""
