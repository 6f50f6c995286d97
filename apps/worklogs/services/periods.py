"""
Calendar helpers shared by summaries and charts.

All boundaries are computed in the current Django time zone so that "today"
means the user's local day, not the UTC one.
"""

from datetime import date, datetime, time, timedelta
from typing import Tuple

from django.conf import settings
from django.utils import dateformat, timezone


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """First and last instant of a local calendar day."""
    tz = timezone.get_current_timezone()
    return (
        timezone.make_aware(datetime.combine(day, time.min), tz),
        timezone.make_aware(datetime.combine(day, time.max), tz),
    )


def range_bounds(first_day: date, last_day: date) -> Tuple[datetime, datetime]:
    """Instants spanning whole local days from first_day to last_day."""
    return day_bounds(first_day)[0], day_bounds(last_day)[1]


def week_days(day: date) -> Tuple[date, date]:
    """Sunday..Saturday week containing day."""
    # date.weekday(): Monday == 0, Sunday == 6
    start = day - timedelta(days=(day.weekday() + 1) % 7)
    return start, start + timedelta(days=6)


def month_days(day: date) -> Tuple[date, date]:
    """First and last day of the calendar month containing day."""
    start = day.replace(day=1)
    if start.month == 12:
        next_month = start.replace(year=start.year + 1, month=1)
    else:
        next_month = start.replace(month=start.month + 1)
    return start, next_month - timedelta(days=1)


def day_label(value) -> str:
    return dateformat.format(value, settings.CHART_DAY_LABEL_FORMAT)


def month_label(value) -> str:
    return dateformat.format(value, settings.CHART_MONTH_LABEL_FORMAT)
