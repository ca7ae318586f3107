from .base import *  # noqa
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
DEBUG = True
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="5xpjGRDKKXRiO2u1AiwUT6fbl5iM89JkQ9lnMCJEhvW1JQvXdNroF2OMSe60KEcR",
)
ALLOWED_HOSTS = ["localhost", "0.0.0.0", "127.0.0.1"] + env.list("DJANGO_ALLOWED_HOSTS", default=[])

# Flyout components
# ------------------------------------------------------------------------------
# surface configuration mistakes while developing
FLYOUT_STRICT_CONFIG = env.bool("FLYOUT_STRICT_CONFIG", True)
LOGGING["loggers"]["flyout"]["level"] = "DEBUG"  # noqa: F405
