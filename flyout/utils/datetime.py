import datetime

from dateutil import parser as date_parser
from django.utils import dateformat
from django.utils.timezone import is_aware, localtime, now
from django.utils.translation import gettext as _

DATE_FORMAT = "M j, Y"
TIME_FORMAT = "g:i A"


def to_local(value: datetime.datetime):
    """Aware datetimes are converted to the current timezone, naive ones are taken as local."""
    if is_aware(value):
        return localtime(value)
    return value


def local_now():
    return to_local(now())


def is_date_before(date: datetime.datetime, days: int):
    before_date = local_now() - datetime.timedelta(days=days)
    return to_local(date).date() == before_date.date()


def parse_date(value):
    """
    Coerce a datetime, date or date string to a datetime.

    Returns None when the value cannot be understood as a date.
    """
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time.min)
    if not isinstance(value, str) or not value.strip():
        return None
    # missing fields are filled in from the current local day
    default = local_now().replace(hour=0, minute=0, second=0, microsecond=0, tzinfo=None)
    try:
        return date_parser.parse(value, default=default)
    except (ValueError, OverflowError):
        return None


def relative_date_label(value, date_format=DATE_FORMAT, time_format=TIME_FORMAT):
    """
    Label a date relative to the current day.

    Dates on the current calendar day read "Today at <time>", the day before reads
    "Yesterday at <time>" and anything else uses date_format. Values that cannot be
    parsed are returned as given.
    """
    parsed = parse_date(value)
    if parsed is None:
        return str(value)

    parsed = to_local(parsed)
    if is_date_before(parsed, 0):
        return _("Today at %(time)s") % {"time": dateformat.format(parsed, time_format)}
    if is_date_before(parsed, 1):
        return _("Yesterday at %(time)s") % {"time": dateformat.format(parsed, time_format)}
    return dateformat.format(parsed, date_format)
