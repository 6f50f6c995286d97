"""Finance service - ledger entries and their read queries."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from apps.finances.models import Finance, Currency
from .exceptions import UnsupportedCurrencyError

logger = logging.getLogger(__name__)


def get_all_finances() -> QuerySet:
    """All entries, newest date first."""
    return Finance.objects.order_by('-date', '-id')


def get_finances_by_type(*, finance_type: str) -> QuerySet:
    return get_all_finances().filter(type=finance_type)


def get_finances_by_currency(*, currency: str) -> QuerySet:
    return get_all_finances().filter(currency=currency)


@transaction.atomic
def create_finance(
    *,
    amount: Decimal,
    currency: str,
    description: str,
    type: str,
    category: Optional[str] = None,
    date: Optional[datetime] = None,
    offset_by_earnings: Decimal = Decimal('0.00')
) -> Finance:
    """
    Record an income or expense.

    Args:
        amount: Positive amount in the entry's currency
        currency: One of CZK, EUR, USD
        description: Free text
        type: 'income' or 'expense'
        category: Optional grouping label
        date: When it happened, defaults to now
        offset_by_earnings: Part of an income already counted as earnings

    Raises:
        UnsupportedCurrencyError: If currency is not a ledger currency
    """
    if currency not in Currency.values:
        raise UnsupportedCurrencyError(f"Unsupported currency: {currency}")

    finance = Finance.objects.create(
        amount=amount,
        currency=currency,
        description=description,
        type=type,
        category=category,
        date=date or timezone.now(),
        offset_by_earnings=offset_by_earnings,
    )

    logger.info(
        "Created %s %s: %s %s", finance.type, finance.id, finance.amount, finance.currency
    )
    return finance
