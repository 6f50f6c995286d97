"""
Finance Charts
==============

Monthly income/expense bars and the per-day currency balance lines.

Example:
    >>> FinanceCharts.all_series()
    {'monthly': [{'name': 'říj 2026', 'income': ..., 'expenses': ..., 'deduction': ...}],
     'currencies': [{'name': '15. 10. 2026', 'CZK': ..., 'EUR': ..., 'USD': ...}]}
"""

from decimal import Decimal

from django.conf import settings
from django.db.models import Case, When, F, Q, Sum, DecimalField
from django.db.models.functions import Coalesce, TruncDate, TruncMonth

from apps.finances.models import Finance, FinanceType
from apps.worklogs.services.periods import day_label, month_label

ZERO = Decimal('0.00')


def _total(expression, **filters):
    return Coalesce(
        Sum(expression, filter=Q(**filters)),
        ZERO,
        output_field=DecimalField(max_digits=14, decimal_places=2),
    )


def _signed_amount():
    """Amount with expenses negated."""
    return Case(
        When(type=FinanceType.EXPENSE, then=-F('amount')),
        default=F('amount'),
        output_field=DecimalField(max_digits=12, decimal_places=2),
    )


class FinanceCharts:
    """
    Aggregations for the finance dashboard.

    Methods:
        monthly: Income, expenses and earnings offset per calendar month.
        currencies: Net balance per local day, one key per currency.
        all_series: Both series keyed as the charts endpoint returns them.
    """

    @staticmethod
    def monthly(queryset=None):
        """
        Per-month totals, oldest month first.

        Only income entries contribute their offset to `deduction`.
        """
        queryset = Finance.objects.all() if queryset is None else queryset
        rows = (
            queryset
            .annotate(month=TruncMonth('date'))
            .values('month')
            .annotate(
                income_total=_total('amount', type=FinanceType.INCOME),
                expenses_total=_total('amount', type=FinanceType.EXPENSE),
                deduction_total=_total('offset_by_earnings', type=FinanceType.INCOME),
            )
            .order_by('month')
        )
        return [
            {
                'name': month_label(row['month']),
                'income': row['income_total'],
                'expenses': row['expenses_total'],
                'deduction': row['deduction_total'],
            }
            for row in rows
        ]

    @staticmethod
    def currencies(queryset=None):
        """Net amount per local day and currency; expenses count negative."""
        queryset = Finance.objects.all() if queryset is None else queryset
        codes = list(settings.CHART_CURRENCIES)
        rows = (
            queryset
            .annotate(day=TruncDate('date'))
            .values('day')
            .annotate(**{
                f'net_{code}': _total(_signed_amount(), currency=code)
                for code in codes
            })
            .order_by('day')
        )

        series = []
        for row in rows:
            point = {'name': day_label(row['day'])}
            for code in codes:
                point[code] = row[f'net_{code}']
            series.append(point)
        return series

    @staticmethod
    def all_series(queryset=None):
        return {
            'monthly': FinanceCharts.monthly(queryset),
            'currencies': FinanceCharts.currencies(queryset),
        }
