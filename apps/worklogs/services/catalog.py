"""Persons and activities that work logs and timers refer to."""

import logging
from decimal import Decimal

from django.db.models import QuerySet

from apps.worklogs.models import Person, Activity

logger = logging.getLogger(__name__)


def get_all_persons() -> QuerySet:
    return Person.objects.order_by('id')


def create_person(*, name: str, hourly_rate: Decimal, deduction_rate: Decimal) -> Person:
    person = Person.objects.create(
        name=name,
        hourly_rate=hourly_rate,
        deduction_rate=deduction_rate,
    )
    logger.info("Created person %s (%s)", person.id, person.name)
    return person


def get_all_activities() -> QuerySet:
    return Activity.objects.order_by('id')


def create_activity(*, name: str, color: str) -> Activity:
    activity = Activity.objects.create(name=name, color=color)
    logger.info("Created activity %s (%s)", activity.id, activity.name)
    return activity
