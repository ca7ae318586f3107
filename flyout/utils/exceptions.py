from django.conf import settings


class ComponentConfigError(ValueError):
    """Raised when a component is given configuration it cannot use."""


def is_strict_config():
    return getattr(settings, "FLYOUT_STRICT_CONFIG", False)
