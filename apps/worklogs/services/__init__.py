"""Services for worklogs business logic."""

from .exceptions import (
    WorkLogServiceError,
    WorkLogNotFoundError,
    InvalidDateRangeError,
)
from .work_log_management import (
    get_all_work_logs,
    get_recent_work_logs,
    get_work_logs_by_person_id,
    get_work_logs_by_activity_id,
    get_work_logs_by_date_range,
    get_work_log_by_id,
    create_work_log,
)
from .catalog import (
    get_all_persons,
    create_person,
    get_all_activities,
    create_activity,
)
from .summaries import (
    get_work_logs_summary_for_day,
    get_work_logs_summary_for_date_range,
    get_dashboard_summary,
)
from .charts import WorkLogCharts

__all__ = [
    # Exceptions
    'WorkLogServiceError',
    'WorkLogNotFoundError',
    'InvalidDateRangeError',
    # Work logs
    'get_all_work_logs',
    'get_recent_work_logs',
    'get_work_logs_by_person_id',
    'get_work_logs_by_activity_id',
    'get_work_logs_by_date_range',
    'get_work_log_by_id',
    'create_work_log',
    # Persons & activities
    'get_all_persons',
    'create_person',
    'get_all_activities',
    'create_activity',
    # Summaries & charts
    'get_work_logs_summary_for_day',
    'get_work_logs_summary_for_date_range',
    'get_dashboard_summary',
    'WorkLogCharts',
]
