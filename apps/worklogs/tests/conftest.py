import pytest
from datetime import datetime, time, timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from apps.worklogs.models import Person, Activity, WorkLog


def local_dt(day, hour, minute=0):
    """Aware datetime in the current time zone."""
    return timezone.make_aware(datetime.combine(day, time(hour, minute)))


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def person(db):
    """Create and return a test person."""
    return Person.objects.create(
        name='Marie',
        hourly_rate=Decimal('275.00'),
        deduction_rate=Decimal('0.3333'),
    )


@pytest.fixture
def other_person(db):
    return Person.objects.create(
        name='Jan',
        hourly_rate=Decimal('300.00'),
        deduction_rate=Decimal('0.1500'),
    )


@pytest.fixture
def activity(db):
    """Create and return a test activity."""
    return Activity.objects.create(name='Programování', color='#B39DDB')


@pytest.fixture
def other_activity(db):
    return Activity.objects.create(name='Schůzky', color='#FFCC80')


@pytest.fixture
def make_work_log(db, person, activity):
    """Factory creating a work log for a local day and hour range."""

    def _make(day, start, end, earnings, deduction, person=person, activity=activity):
        start_time = local_dt(day, *start)
        end_time = local_dt(day, *end)
        return WorkLog.objects.create(
            person=person,
            activity=activity,
            start_time=start_time,
            end_time=end_time,
            duration_minutes=(end_time - start_time).total_seconds() / 60,
            earnings=Decimal(earnings),
            deduction=Decimal(deduction),
        )

    return _make


@pytest.fixture
def today():
    return timezone.localdate()


@pytest.fixture
def yesterday(today):
    return today - timedelta(days=1)


@pytest.fixture
def todays_work_logs(make_work_log, today, other_activity):
    """The two logs of the demo day: 135 min and 105 min."""
    return [
        make_work_log(today, (9, 0), (11, 15), '619', '206'),
        make_work_log(today, (13, 0), (14, 45), '481', '160', activity=other_activity),
    ]
