"""Domain exceptions for worklogs app."""


class WorkLogServiceError(Exception):
    """Base exception for all work log service errors."""
    pass


class WorkLogNotFoundError(WorkLogServiceError):
    """Work log does not exist."""
    pass


class InvalidDateRangeError(WorkLogServiceError):
    """Start of a range lies after its end."""
    pass
