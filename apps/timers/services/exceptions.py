"""Domain exceptions for timers app."""


class TimerServiceError(Exception):
    """Base exception for all timer service errors."""
    pass


class TimerSessionNotFoundError(TimerServiceError):
    """Timer session does not exist."""
    pass
