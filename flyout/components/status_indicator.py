import dataclasses
from dataclasses import dataclass, field
from typing import NamedTuple

from django.db import models
from django.utils.html import format_html, format_html_join
from django.utils.safestring import mark_safe
from django.utils.translation import gettext as _
from django.utils.translation import gettext_lazy

from flyout.components.base import Component, IconRendererMixin, coerce_choice
from flyout.utils.html import build_classes, join_html


class ServiceStatus(models.TextChoices):
    operational = "operational", gettext_lazy("Operational")
    degraded = "degraded", gettext_lazy("Degraded Performance")
    down = "down", gettext_lazy("System Down")
    maintenance = "maintenance", gettext_lazy("Under Maintenance")


class StatusDisplay(NamedTuple):
    icon: str
    color: str


STATUS_DISPLAY = {
    ServiceStatus.operational: StatusDisplay(icon="yes-alt", color="success"),
    ServiceStatus.degraded: StatusDisplay(icon="warning", color="warning"),
    ServiceStatus.down: StatusDisplay(icon="no-alt", color="error"),
    ServiceStatus.maintenance: StatusDisplay(icon="admin-tools", color="info"),
}


@dataclass(frozen=True)
class StatusIndicatorConfig:
    status: str = ServiceStatus.operational
    title: str = ""  # defaults to "System Status"
    message: str = ""
    show_details: bool = False
    details: dict = field(default_factory=dict)
    show_icon: bool = True
    show_pulse: bool = True  # only shown while operational
    class_name: str = "wp-flyout-status-indicator"


class StatusIndicator(IconRendererMixin, Component):
    """Service health widget for the operational, degraded, down and maintenance states."""

    config_class = StatusIndicatorConfig

    def __init__(self, config=None, **kwargs):
        super().__init__(config, **kwargs)
        status = coerce_choice(
            "StatusIndicator", "status", self.config.status, ServiceStatus, ServiceStatus.operational
        )
        title = self.config.title or self.translate("System Status")
        self.config = dataclasses.replace(self.config, status=status, title=title)

    @classmethod
    def operational(cls, title="", message=""):
        return cls(status=ServiceStatus.operational, title=title, message=message)

    @classmethod
    def degraded(cls, title, message, details=None):
        return cls(
            status=ServiceStatus.degraded,
            title=title,
            message=message,
            show_details=bool(details),
            details=details or {},
        )

    @classmethod
    def down(cls, title, message, details=None):
        return cls(
            status=ServiceStatus.down,
            title=title,
            message=message,
            show_details=bool(details),
            details=details or {},
            show_pulse=False,
        )

    @classmethod
    def maintenance(cls, title, message, estimated=""):
        details = {_("Estimated Completion"): estimated} if estimated else {}
        return cls(
            status=ServiceStatus.maintenance,
            title=title,
            message=message,
            show_details=bool(details),
            details=details,
            show_pulse=False,
        )

    @classmethod
    def quick(cls, status, title, message=""):
        return cls(status=status, title=title, message=message).render()

    @property
    def display(self):
        return STATUS_DISPLAY[self.config.status]

    @property
    def show_pulse(self):
        return self.config.show_pulse and self.config.status == ServiceStatus.operational

    def render(self):
        config = self.config
        header = []
        if config.show_icon:
            pulse = mark_safe('<span class="status-pulse"></span>') if self.show_pulse else ""
            icon = self.render_icon(self.display.icon)
            header.append(format_html('<div class="status-icon">{}{}</div>', pulse, icon))

        info = [
            format_html('<h4 class="status-title">{}</h4>', self.context.text(config.title)),
            format_html('<p class="status-label">{}</p>', self.context.text(config.status.label)),
        ]
        if config.message:
            info.append(format_html('<p class="status-message">{}</p>', self.context.text(config.message)))
        header.append(format_html('<div class="status-info">{}</div>', join_html(info)))

        parts = [format_html('<div class="status-header">{}</div>', join_html(header))]
        if config.show_details and config.details:
            parts.append(format_html('<div class="status-details">{}</div>', self.render_details()))

        return format_html(
            '<div class="{}">{}</div>',
            self.context.attr(build_classes([config.class_name, f"status-{self.display.color}"])),
            join_html(parts),
        )

    def render_details(self):
        return format_html_join(
            "",
            '<div class="status-detail-item"><span class="detail-label">{}:</span> '
            '<span class="detail-value">{}</span></div>',
            ((self.context.text(label), self.context.text(value)) for label, value in self.config.details.items()),
        )
