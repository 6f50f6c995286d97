import pytest
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from apps.worklogs.models import Person, Activity
from apps.timers.models import TimerSession


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def person(db):
    return Person.objects.create(
        name='Marie',
        hourly_rate=Decimal('275.00'),
        deduction_rate=Decimal('0.3333'),
    )


@pytest.fixture
def activity(db):
    return Activity.objects.create(name='Programování', color='#B39DDB')


@pytest.fixture
def make_session(db, person, activity):
    """Factory creating a timer session with the given status."""

    def _make(status='running', **extra):
        return TimerSession.objects.create(
            person=person,
            activity=activity,
            start_time=extra.pop('start_time', timezone.now()),
            status=status,
            **extra,
        )

    return _make
