"""
Summary service - totals of minutes, earnings and deduction.

Example:
    >>> summary = get_work_logs_summary_for_day(day=timezone.localdate())
    >>> summary['work_time_minutes']
    135.0
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from django.conf import settings
from django.db.models import Sum, FloatField
from django.db.models.functions import Coalesce
from django.utils import dateformat, timezone

from .periods import day_bounds, range_bounds, week_days, month_days, day_label
from .work_log_management import get_work_logs_by_date_range


def _totals(queryset) -> dict:
    totals = queryset.aggregate(
        work_time_minutes=Coalesce(Sum('duration_minutes'), 0.0, output_field=FloatField()),
        earnings=Coalesce(Sum('earnings'), Decimal('0.00')),
        deduction=Coalesce(Sum('deduction'), Decimal('0.00')),
    )
    return {
        'work_time_minutes': totals['work_time_minutes'],
        'earnings': totals['earnings'],
        'deduction': totals['deduction'],
    }


def get_work_logs_summary_for_date_range(*, start: datetime, end: datetime) -> dict:
    """
    Sum minutes, earnings and deduction of logs starting within [start, end].

    Returns:
        Dictionary with work_time_minutes, earnings and deduction

    Raises:
        InvalidDateRangeError: If start is after end
    """
    return _totals(get_work_logs_by_date_range(start=start, end=end))


def get_work_logs_summary_for_day(*, day: date) -> dict:
    """Totals for one local calendar day, tagged with the day itself."""
    start, end = day_bounds(day)
    summary = get_work_logs_summary_for_date_range(start=start, end=end)
    summary['date'] = day
    return summary


def get_dashboard_summary(*, today: Optional[date] = None) -> dict:
    """
    Today / this week / this month totals for the dashboard cards.

    The week runs Sunday to Saturday, the month is the calendar month;
    both cover whole local days.
    """
    today = today or timezone.localdate()

    today_summary = get_work_logs_summary_for_day(day=today)
    today_summary['date'] = day_label(today)

    week_start, week_end = week_days(today)
    week_from, week_to = range_bounds(week_start, week_end)
    week = get_work_logs_summary_for_date_range(start=week_from, end=week_to)
    week['range'] = f"{day_label(week_start)}-{day_label(week_end)}"

    month_start, month_end = month_days(today)
    month_from, month_to = range_bounds(month_start, month_end)
    month = get_work_logs_summary_for_date_range(start=month_from, end=month_to)
    month['name'] = dateformat.format(month_start, settings.SUMMARY_MONTH_LABEL_FORMAT)

    return {
        'today': today_summary,
        'week': week,
        'month': month,
    }
