"""Work log service - creation and read queries."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.db.models import QuerySet

from apps.worklogs.models import WorkLog, Person, Activity
from .exceptions import WorkLogNotFoundError, InvalidDateRangeError

logger = logging.getLogger(__name__)


def _work_logs() -> QuerySet:
    return WorkLog.objects.select_related('person', 'activity').order_by('-start_time', '-id')


def get_all_work_logs() -> QuerySet:
    """All work logs, most recent start time first."""
    return _work_logs()


def get_recent_work_logs(*, limit: int) -> list:
    """
    Return the `limit` most recent work logs by start time.

    Fewer are returned when fewer exist.
    """
    return list(_work_logs()[:limit])


def get_work_logs_by_person_id(*, person_id: int) -> QuerySet:
    return _work_logs().filter(person_id=person_id)


def get_work_logs_by_activity_id(*, activity_id: int) -> QuerySet:
    return _work_logs().filter(activity_id=activity_id)


def get_work_logs_by_date_range(
    *,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None
) -> QuerySet:
    """
    Work logs whose start time falls within [start, end], both inclusive.

    A missing bound leaves that side of the range open.

    Raises:
        InvalidDateRangeError: If start is after end
    """
    if start and end and start > end:
        raise InvalidDateRangeError("Start of range must not be after its end")

    queryset = _work_logs()
    if start:
        queryset = queryset.filter(start_time__gte=start)
    if end:
        queryset = queryset.filter(start_time__lte=end)
    return queryset


def get_work_log_by_id(*, work_log_id: int) -> WorkLog:
    """
    Raises:
        WorkLogNotFoundError: If no work log has this id
    """
    try:
        return _work_logs().get(id=work_log_id)
    except WorkLog.DoesNotExist:
        raise WorkLogNotFoundError(f"Work log with id {work_log_id} not found")


@transaction.atomic
def create_work_log(
    *,
    person: Person,
    activity: Activity,
    start_time: datetime,
    end_time: datetime,
    duration_minutes: float,
    earnings: Decimal,
    deduction: Decimal
) -> WorkLog:
    """
    Record a finished work interval.

    Duration, earnings and deduction are stored exactly as supplied; the
    creation timestamp is set here.
    """
    work_log = WorkLog.objects.create(
        person=person,
        activity=activity,
        start_time=start_time,
        end_time=end_time,
        duration_minutes=duration_minutes,
        earnings=earnings,
        deduction=deduction,
    )

    logger.info(
        "Created work log %s: %s on %s, %s min",
        work_log.id, person.name, activity.name, duration_minutes
    )
    return work_log
