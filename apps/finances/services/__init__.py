"""Services for finances business logic."""

from .exceptions import (
    FinanceServiceError,
    UnsupportedCurrencyError,
)
from .finance_management import (
    get_all_finances,
    get_finances_by_type,
    get_finances_by_currency,
    create_finance,
)
from .charts import FinanceCharts

__all__ = [
    # Exceptions
    'FinanceServiceError',
    'UnsupportedCurrencyError',
    # Finances
    'get_all_finances',
    'get_finances_by_type',
    'get_finances_by_currency',
    'create_finance',
    # Charts
    'FinanceCharts',
]
