import pytest
from datetime import datetime
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from apps.finances.models import Finance


def local_dt(year, month, day, hour=12):
    return timezone.make_aware(datetime(year, month, day, hour))


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def make_finance(db):
    """Factory creating a ledger entry."""

    def _make(amount, type='income', currency='CZK', when=None, offset='0', **extra):
        return Finance.objects.create(
            amount=Decimal(amount),
            currency=currency,
            description=extra.pop('description', 'Položka'),
            type=type,
            category=extra.pop('category', None),
            date=when or timezone.now(),
            offset_by_earnings=Decimal(offset),
        )

    return _make


@pytest.fixture
def demo_finances(make_finance):
    """The three demo entries."""
    return [
        make_finance('5000', 'income', 'CZK', local_dt(2026, 10, 14),
                     offset='1200', description='Faktura za projekt', category='Práce'),
        make_finance('1500', 'expense', 'CZK', local_dt(2026, 10, 15),
                     description='Nákup potravin', category='Jídlo'),
        make_finance('200', 'income', 'EUR', local_dt(2026, 10, 15),
                     description='Platba za služby', category='Práce'),
    ]
