from django.utils.translation import gettext as _

EMPTY_TEXT = "—"


def is_empty_value(value):
    """Like a falsy check, but 0, 0.0, "0" and False count as values."""
    if value is None:
        return True
    if isinstance(value, bool | int | float):
        return False
    if isinstance(value, str):
        return value == ""
    try:
        return len(value) == 0
    except TypeError:
        return False


def format_boolean(value, yes_text="", no_text=""):
    yes_text = yes_text or _("Yes")
    no_text = no_text or _("No")
    return yes_text if value else no_text


def format_value(value, empty_text=EMPTY_TEXT):
    if is_empty_value(value):
        return empty_text

    if isinstance(value, bool):
        return format_boolean(value)

    if isinstance(value, list | tuple | set | frozenset):
        return ", ".join(str(item) for item in value)

    return str(value)


def to_float(value, default=0.0):
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def format_number(value):
    """Render a float the short way: 5.0 -> "5", 2.50 -> "2.5"."""
    return f"{value:.14g}"
