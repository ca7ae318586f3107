from dataclasses import dataclass, field

from django.utils.html import format_html
from django.utils.translation import gettext as _

from flyout.components.base import Component, HtmlAttributesMixin
from flyout.utils.html import build_classes, join_html


@dataclass(frozen=True)
class EmptyStateConfig:
    id: str = ""
    icon: str = "admin-page"
    title: str = ""
    description: str = ""
    action_text: str = ""
    action_url: str = ""
    action_class: str = "button"
    action_attrs: dict = field(default_factory=dict)
    class_name: str = ""


class EmptyState(HtmlAttributesMixin, Component):
    """Placeholder panel shown when there is nothing else to display."""

    config_class = EmptyStateConfig
    id_prefix = "empty-state"

    @classmethod
    def no_data(cls, description=""):
        return cls(
            title=_("No Data Available"),
            icon="chart-bar",
            description=description or _("There is no data to display at this time."),
        )

    @classmethod
    def no_files(cls, action_text=""):
        return cls(
            title=_("No Files"),
            icon="media-document",
            description=_("No files have been added yet."),
            action_text=action_text or _("Add File"),
            action_class="button add-file-trigger",
        )

    @classmethod
    def no_results(cls, description=""):
        return cls(
            title=_("No Results Found"),
            icon="search",
            description=description or _("Try adjusting your search or filter criteria."),
        )

    @classmethod
    def no_items(cls, description=""):
        return cls(
            title=_("No Items Found"),
            icon="admin-page",
            description=description or _("No items to display."),
        )

    def render(self):
        config = self.config
        parts = []
        if config.icon:
            parts.append(
                format_html(
                    '<span class="empty-state-icon dashicons dashicons-{}"></span>', self.context.attr(config.icon)
                )
            )
        if config.title:
            parts.append(format_html('<h3 class="empty-state-title">{}</h3>', self.context.text(config.title)))
        if config.description:
            parts.append(
                format_html('<p class="empty-state-description">{}</p>', self.context.text(config.description))
            )
        if config.action_text:
            parts.append(self.render_action())

        return format_html(
            '<div id="{}" class="{}">{}</div>',
            self.context.attr(config.id),
            self.context.attr(build_classes(["wp-flyout-empty-state", config.class_name])),
            join_html(parts),
        )

    def render_action(self):
        config = self.config
        attrs = self.build_attributes(config.action_attrs)
        if attrs:
            attrs = format_html(" {}", attrs)
        if config.action_url:
            return format_html(
                '<a href="{}" class="{}"{}>{}</a>',
                self.context.url(config.action_url),
                self.context.attr(config.action_class),
                attrs,
                self.context.text(config.action_text),
            )
        return format_html(
            '<button type="button" class="{}"{}>{}</button>',
            self.context.attr(config.action_class),
            attrs,
            self.context.text(config.action_text),
        )
