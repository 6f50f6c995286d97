"""
Work Log Charts
===============

Pre-grouped series for the dashboard charts. Every series is a list of
plain dictionaries that the chart components consume directly.

Example:
    Getting all three series::

        from apps.worklogs.services import WorkLogCharts

        charts = WorkLogCharts.all_series()
        charts['byDay']       # [{'name': '15. 10. 2026', 'minutes': 270.0, 'earnings': ...}, ...]
        charts['byActivity']  # [{'name': 'Programování', 'minutes': ..., 'color': '#B39DDB'}, ...]
"""

from decimal import Decimal

from django.db.models import Sum, FloatField
from django.db.models.functions import Coalesce, TruncDate

from apps.worklogs.models import WorkLog
from .periods import day_label


def _sums():
    return {
        'minutes': Coalesce(Sum('duration_minutes'), 0.0, output_field=FloatField()),
        'earnings_total': Coalesce(Sum('earnings'), Decimal('0.00')),
    }


class WorkLogCharts:
    """
    Aggregations of minutes and earnings for chart endpoints.

    Methods:
        by_day: Totals per local calendar day, oldest day first.
        by_activity: Totals per activity with the activity colour.
        by_person: Totals per person.
        all_series: The three series keyed as the charts endpoint returns them.
    """

    @staticmethod
    def by_day(queryset=None):
        """Totals per local day of the log start time, oldest day first."""
        queryset = WorkLog.objects.all() if queryset is None else queryset
        rows = (
            queryset
            .annotate(day=TruncDate('start_time'))
            .values('day')
            .annotate(**_sums())
            .order_by('day')
        )
        return [
            {
                'name': day_label(row['day']),
                'minutes': row['minutes'],
                'earnings': row['earnings_total'],
            }
            for row in rows
        ]

    @staticmethod
    def by_activity(queryset=None):
        queryset = WorkLog.objects.all() if queryset is None else queryset
        rows = (
            queryset
            .values('activity_id', 'activity__name', 'activity__color')
            .annotate(**_sums())
            .order_by('activity_id')
        )
        return [
            {
                'name': row['activity__name'],
                'minutes': row['minutes'],
                'earnings': row['earnings_total'],
                'color': row['activity__color'],
            }
            for row in rows
        ]

    @staticmethod
    def by_person(queryset=None):
        queryset = WorkLog.objects.all() if queryset is None else queryset
        rows = (
            queryset
            .values('person_id', 'person__name')
            .annotate(**_sums())
            .order_by('person_id')
        )
        return [
            {
                'name': row['person__name'],
                'minutes': row['minutes'],
                'earnings': row['earnings_total'],
            }
            for row in rows
        ]

    @staticmethod
    def all_series(queryset=None):
        return {
            'byDay': WorkLogCharts.by_day(queryset),
            'byActivity': WorkLogCharts.by_activity(queryset),
            'byPerson': WorkLogCharts.by_person(queryset),
        }
