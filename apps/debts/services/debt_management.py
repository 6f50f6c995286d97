"""
Debt service - creating and updating debts.

Balances are only ever derived from total and paid amounts; callers never
set active directly.
"""

import logging
from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.db.models import QuerySet

from apps.debts.models import Debt
from .exceptions import DebtNotFoundError, InvalidDebtAmountsError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('name', 'total_amount')


def get_all_debts() -> QuerySet:
    """All debts in creation order."""
    return Debt.objects.order_by('id')


def get_debt_by_id(*, debt_id: int) -> Debt:
    """
    Raises:
        DebtNotFoundError: If no debt has this id
    """
    try:
        return Debt.objects.get(id=debt_id)
    except Debt.DoesNotExist:
        raise DebtNotFoundError(f"Debt with id {debt_id} not found")


@transaction.atomic
def create_debt(
    *,
    name: str,
    total_amount: Decimal,
    paid_amount: Decimal = Decimal('0.00'),
    remaining_amount: Optional[Decimal] = None
) -> Debt:
    """
    Create a debt, deriving the remaining amount and active flag.

    Args:
        name: Label of the debt
        total_amount: Full amount owed
        paid_amount: Already paid before tracking started
        remaining_amount: Optional; must equal total_amount - paid_amount

    Raises:
        InvalidDebtAmountsError: If remaining_amount is given and does not
            match total_amount - paid_amount
    """
    expected_remaining = total_amount - paid_amount
    if remaining_amount is not None and remaining_amount != expected_remaining:
        raise InvalidDebtAmountsError(
            f"Remaining amount must be {expected_remaining} "
            f"(total {total_amount} minus paid {paid_amount})"
        )

    debt = Debt.objects.create(
        name=name,
        total_amount=total_amount,
        paid_amount=paid_amount,
        remaining_amount=expected_remaining,
        active=expected_remaining > 0,
    )

    logger.info("Created debt %s (%s): %s remaining", debt.id, debt.name, debt.remaining_amount)
    return debt


@transaction.atomic
def update_debt(*, debt_id: int, data: dict) -> Debt:
    """
    Shallow-merge name and/or total_amount into an existing debt.

    A new total re-derives remaining_amount and active from the paid amount.

    Raises:
        DebtNotFoundError: If no debt has this id
    """
    try:
        debt = Debt.objects.select_for_update().get(id=debt_id)
    except Debt.DoesNotExist:
        raise DebtNotFoundError(f"Debt with id {debt_id} not found")

    changes = {key: value for key, value in data.items() if key in UPDATABLE_FIELDS}
    for field, value in changes.items():
        setattr(debt, field, value)

    debt.remaining_amount = debt.total_amount - debt.paid_amount
    debt.active = debt.remaining_amount > 0
    debt.save()

    logger.info("Updated debt %s: %s", debt.id, ', '.join(sorted(changes)) or 'no changes')
    return debt
