import pytest
from datetime import timedelta
from decimal import Decimal
from unittest.mock import MagicMock
from django.utils import timezone
from rest_framework.test import APIClient
from apps.worklogs.models import Person, Activity, WorkLog
from apps.finances.models import Finance
from apps.debts.services import create_debt


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def ledger(db):
    """One work log, one finance entry and one debt."""
    person = Person.objects.create(
        name='Marie', hourly_rate=Decimal('275.00'), deduction_rate=Decimal('0.3333')
    )
    activity = Activity.objects.create(name='Programování', color='#B39DDB')
    start = timezone.now() - timedelta(hours=3)
    work_log = WorkLog.objects.create(
        person=person,
        activity=activity,
        start_time=start,
        end_time=start + timedelta(minutes=135),
        duration_minutes=135,
        earnings=Decimal('619.00'),
        deduction=Decimal('206.00'),
    )
    finance = Finance.objects.create(
        amount=Decimal('5000.00'),
        currency='CZK',
        description='Faktura za projekt',
        type='income',
        category='Práce',
        offset_by_earnings=Decimal('1200.00'),
    )
    debt = create_debt(
        name='Půjčka na auto', total_amount=Decimal('78500'), paid_amount=Decimal('42300')
    )
    return {'work_log': work_log, 'finance': finance, 'debt': debt}


def github_response(status_code=201, body=None):
    """Fake requests.Response for the contents API."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.content = b'{}'
    response.json.return_value = {} if body is None else body
    return response
