from dateutil.relativedelta import relativedelta
from django.utils import timezone
from rest_framework.pagination import _positive_int


def get_today(with_time=False, reset_hours=False):
    """
    Returns today's date.

    Setting `with_time` to True returns a datetime.datetime object.
    Setting `with_time` to False returns a datetime.date object.

    Setting `reset_hours` to True resets the time to the first second of the day but
    `with_time` must be set to True while using `reset_hours`.
    """
    datetime_now = timezone.now().astimezone() if with_time else timezone.now().astimezone().date()
    if reset_hours and with_time:
        datetime_now = datetime_now.replace(hour=0, minute=0, second=1)
    return datetime_now


def years_ago(years, today=None):
    """Date `years` calendar years before `today`, clamped on leap days"""
    return (today or get_today()) - relativedelta(years=years)


def to_positive_int(value, default):
    """
    Coerce query string value to an integer >= 1.

    Missing, unparsable and non positive values fall back to `default`.
    """
    try:
        return _positive_int(value, strict=True)
    except (TypeError, ValueError):
        return default
