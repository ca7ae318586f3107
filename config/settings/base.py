"""
Base settings to build other settings files upon.
"""
from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve(strict=True).parent.parent.parent
# flyout/
APPS_DIR = BASE_DIR / "flyout"

env = environ.Env()

env.read_env(str(BASE_DIR / ".env"))

# GENERAL
# ------------------------------------------------------------------------------
DEBUG = env.bool("DJANGO_DEBUG", False)
SECRET_KEY = env("DJANGO_SECRET_KEY", default="")
ALLOWED_HOSTS = env.list("DJANGO_ALLOWED_HOSTS", default=[])
TIME_ZONE = env("DJANGO_TIME_ZONE", default="UTC")
LANGUAGE_CODE = "en-us"
USE_I18N = True
USE_TZ = True
LOCALE_PATHS = [str(BASE_DIR / "locale")]

# APPS
# ------------------------------------------------------------------------------
INSTALLED_APPS = [
    "flyout.components",
]

# TEMPLATES
# ------------------------------------------------------------------------------
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [str(APPS_DIR / "templates")],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.i18n",
                "django.template.context_processors.tz",
            ],
        },
    }
]

# LOGGING
# ------------------------------------------------------------------------------
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(levelname)s %(asctime)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {"level": "INFO", "handlers": ["console"]},
    "loggers": {
        "flyout": {
            "level": env("FLYOUT_LOG_LEVEL", default="WARNING"),
        },
    },
}

# Flyout components
# ------------------------------------------------------------------------------
# dotted path to the class providing escaping and translation to components
FLYOUT_RENDER_CONTEXT = env("FLYOUT_RENDER_CONTEXT", default="flyout.utils.html.RenderContext")
# raise ComponentConfigError for unknown status/tag/type values instead of falling back
FLYOUT_STRICT_CONFIG = env.bool("FLYOUT_STRICT_CONFIG", False)
# Django date format strings used by the timeline
FLYOUT_TIMELINE_DATE_FORMAT = env("FLYOUT_TIMELINE_DATE_FORMAT", default="M j, Y")
FLYOUT_TIMELINE_TIME_FORMAT = env("FLYOUT_TIMELINE_TIME_FORMAT", default="g:i A")
