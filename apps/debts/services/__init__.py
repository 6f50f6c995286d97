"""Services for debts business logic."""

from .exceptions import (
    DebtServiceError,
    DebtNotFoundError,
    InvalidDebtAmountsError,
)
from .debt_management import (
    get_all_debts,
    get_debt_by_id,
    create_debt,
    update_debt,
)
from .debt_payments import (
    get_all_debt_payments,
    get_debt_payments_by_debt_id,
    create_debt_payment,
)
from .statistics import get_debt_stats

__all__ = [
    # Exceptions
    'DebtServiceError',
    'DebtNotFoundError',
    'InvalidDebtAmountsError',
    # Debts
    'get_all_debts',
    'get_debt_by_id',
    'create_debt',
    'update_debt',
    # Payments
    'get_all_debt_payments',
    'get_debt_payments_by_debt_id',
    'create_debt_payment',
    # Statistics
    'get_debt_stats',
]
