"""Timer session service - the persisted state of the dashboard stopwatch."""

import logging
from datetime import datetime
from typing import Any, Optional

from django.db import transaction

from apps.timers.models import TimerSession, TimerStatus
from apps.worklogs.models import Person, Activity
from .exceptions import TimerSessionNotFoundError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    'person',
    'activity',
    'start_time',
    'status',
    'paused_duration_seconds',
    'serialized_state',
)


def get_current_timer_session() -> Optional[TimerSession]:
    """The oldest session that is not stopped, or None."""
    return (
        TimerSession.objects
        .select_related('person', 'activity')
        .exclude(status=TimerStatus.STOPPED)
        .order_by('id')
        .first()
    )


@transaction.atomic
def create_timer_session(
    *,
    person: Person,
    activity: Activity,
    start_time: datetime,
    status: str,
    paused_duration_seconds: int = 0,
    serialized_state: Any = None
) -> TimerSession:
    session = TimerSession.objects.create(
        person=person,
        activity=activity,
        start_time=start_time,
        status=status,
        paused_duration_seconds=paused_duration_seconds,
        serialized_state=serialized_state,
    )
    logger.info("Started timer session %s (%s)", session.id, session.status)
    return session


@transaction.atomic
def update_timer_session(*, session_id: int, data: dict) -> TimerSession:
    """
    Shallow-merge the given fields into a session.

    Keys outside the session's own fields are ignored.

    Raises:
        TimerSessionNotFoundError: If no session has this id
    """
    try:
        session = TimerSession.objects.select_for_update().get(id=session_id)
    except TimerSession.DoesNotExist:
        raise TimerSessionNotFoundError(f"Timer session with id {session_id} not found")

    changed = []
    for field, value in data.items():
        if field in UPDATABLE_FIELDS:
            setattr(session, field, value)
            changed.append(field)

    if changed:
        session.save(update_fields=changed)

    logger.info("Updated timer session %s: status=%s", session.id, session.status)
    return session
