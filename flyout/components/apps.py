from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class ComponentsConfig(AppConfig):
    name = "flyout.components"
    verbose_name = _("Components")

    def ready(self):
        from flyout.components.registry import register_builtin_components

        register_builtin_components()
