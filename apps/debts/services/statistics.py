"""Debt statistics for the debts dashboard."""

from decimal import Decimal

from django.conf import settings
from django.db.models import Sum
from django.db.models.functions import Coalesce

from .debt_management import get_all_debts

DEFAULT_COLORS = ['#B39DDB', '#FFCC80', '#FFF59D', '#E6D7C3', '#F5F5F5']


def get_debt_stats() -> dict:
    """
    Totals over all debts plus each debt's remaining amount.

    Colours cycle through DEBT_CHART_COLORS in creation order, falling back
    to DEFAULT_COLORS when none are configured.

    Returns:
        Dictionary with total_debt, total_paid and debts
        (list of {'name', 'amount', 'color'})
    """
    debts = get_all_debts()
    colors = list(settings.DEBT_CHART_COLORS) or DEFAULT_COLORS

    totals = debts.aggregate(
        total_debt=Coalesce(Sum('total_amount'), Decimal('0.00')),
        total_paid=Coalesce(Sum('paid_amount'), Decimal('0.00')),
    )

    return {
        'total_debt': totals['total_debt'],
        'total_paid': totals['total_paid'],
        'debts': [
            {
                'name': debt.name,
                'amount': debt.remaining_amount,
                'color': colors[index % len(colors)],
            }
            for index, debt in enumerate(debts)
        ],
    }
