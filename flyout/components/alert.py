import dataclasses
from dataclasses import dataclass

from django.db import models
from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _

from flyout.components.base import Component, HtmlAttributesMixin, IconRendererMixin, build_config, coerce_choice
from flyout.utils.html import build_classes, join_html


class AlertType(models.TextChoices):
    success = "success", _("Success")
    info = "info", _("Info")
    warning = "warning", _("Warning")
    error = "error", _("Error")


ALERT_ICONS = {
    AlertType.success: "yes-alt",
    AlertType.info: "info",
    AlertType.warning: "warning",
    AlertType.error: "dismiss",
}


@dataclass(frozen=True)
class AlertAction:
    text: str
    url: str = "#"
    action: str | None = None  # value for the data-action attribute
    class_name: str = "button-link"
    icon: str | None = None


@dataclass(frozen=True)
class AlertConfig:
    type: str = AlertType.info
    dismissible: bool = False
    icon: str | None = None  # None picks the icon for the alert type
    actions: tuple = ()
    class_name: str = "wp-flyout-alert"
    inline: bool = True  # False renders a full width banner


class Alert(HtmlAttributesMixin, IconRendererMixin, Component):
    """
    Inline or banner message box with an icon and optional action links.

    The mutators (dismissible, banner, inline, icon, action) return a new Alert so
    they can be chained without changing the original.
    """

    config_class = AlertConfig

    def __init__(self, message, config=None, **kwargs):
        super().__init__(config, **kwargs)
        self.message = message
        alert_type = coerce_choice("Alert", "type", self.config.type, AlertType, AlertType.info)
        icon = self.config.icon if self.config.icon is not None else ALERT_ICONS[alert_type]
        actions = tuple(self._coerce_action(action) for action in self.config.actions)
        self.config = dataclasses.replace(self.config, type=alert_type, icon=icon, actions=actions)

    @classmethod
    def success(cls, message):
        return cls(message, type=AlertType.success)

    @classmethod
    def info(cls, message):
        return cls(message, type=AlertType.info)

    @classmethod
    def warning(cls, message):
        return cls(message, type=AlertType.warning)

    @classmethod
    def error(cls, message):
        return cls(message, type=AlertType.error)

    @classmethod
    def quick(cls, message, type=AlertType.info):
        return cls(message, type=type).render()

    def dismissible(self):
        return self._replace(dismissible=True)

    def banner(self):
        return self._replace(inline=False)

    def inline(self):
        return self._replace(inline=True)

    def icon(self, icon):
        return self._replace(icon=icon)

    def action(self, text, url="#", action=None, **options):
        new_action = build_config(AlertAction, {"text": text, "url": url, "action": action}, options)
        return self._replace(actions=self.config.actions + (new_action,))

    @staticmethod
    def _coerce_action(action):
        if isinstance(action, AlertAction):
            return action
        return build_config(AlertAction, action)

    def render(self):
        config = self.config
        classes = build_classes(
            [
                config.class_name,
                f"alert-{config.type}",
                "alert-banner" if not config.inline else "",
                "is-dismissible" if config.dismissible else "",
            ]
        )

        parts = []
        if config.icon:
            parts.append(format_html('<div class="alert-icon">{}</div>', self.render_icon(config.icon)))

        content = [format_html('<div class="alert-message">{}</div>', self.context.rich_text(self.message))]
        if config.actions:
            actions = join_html(self.render_action(action) for action in config.actions)
            content.append(format_html('<div class="alert-actions">{}</div>', actions))
        parts.append(format_html('<div class="alert-content">{}</div>', join_html(content)))

        if config.dismissible:
            parts.append(
                format_html(
                    '<button type="button" class="alert-dismiss" data-action="dismiss-alert" aria-label="{}">'
                    "{}</button>",
                    self.context.attr(self.translate("Dismiss alert")),
                    self.render_icon("no-alt"),
                )
            )

        return format_html(
            '<div class="{}" role="alert"><div class="alert-content-wrapper">{}</div></div>',
            self.context.attr(classes),
            join_html(parts),
        )

    def render_action(self, action):
        attrs = join_html(
            [
                self.build_attributes({"class": action.class_name}),
                self.build_data_attributes({"action": action.action or None}),
            ],
            " ",
        )
        return format_html(
            '<a href="{}" {}>{}{}</a>',
            self.context.url(action.url),
            attrs,
            self.render_icon(action.icon),
            self.context.text(action.text),
        )
