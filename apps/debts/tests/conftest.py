import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from apps.debts.services import create_debt


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def car_loan(db):
    return create_debt(
        name='Půjčka na auto',
        total_amount=Decimal('78500'),
        paid_amount=Decimal('42300'),
    )


@pytest.fixture
def credit_card(db):
    return create_debt(
        name='Kreditní karta',
        total_amount=Decimal('22400'),
        paid_amount=Decimal('14560'),
    )


@pytest.fixture
def demo_debts(car_loan, credit_card):
    parents = create_debt(
        name='Půjčka od rodičů',
        total_amount=Decimal('30000'),
        paid_amount=Decimal('6000'),
    )
    return [car_loan, credit_card, parents]
