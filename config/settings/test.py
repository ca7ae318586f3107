"""
Settings for the test suite.
"""

from .base import *  # noqa

SECRET_KEY = "flyout-components-tests"

TEMPLATES[0]["OPTIONS"]["debug"] = True  # type: ignore # noqa: F405

# components fall back to defaults on bad input unless a test enables strict mode
FLYOUT_STRICT_CONFIG = False
FLYOUT_RENDER_CONTEXT = "flyout.utils.html.RenderContext"
