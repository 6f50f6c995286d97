"""Services for timers business logic."""

from .exceptions import (
    TimerServiceError,
    TimerSessionNotFoundError,
)
from .timer_sessions import (
    get_current_timer_session,
    create_timer_session,
    update_timer_session,
)

__all__ = [
    'TimerServiceError',
    'TimerSessionNotFoundError',
    'get_current_timer_session',
    'create_timer_session',
    'update_timer_session',
]
