"""Debt payment service - recording instalments and applying them to debts."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from apps.debts.models import Debt, DebtPayment
from .exceptions import DebtNotFoundError

logger = logging.getLogger(__name__)


def _payments() -> QuerySet:
    return DebtPayment.objects.select_related('debt').order_by('-date', '-id')


def get_all_debt_payments() -> QuerySet:
    """All payments, newest date first."""
    return _payments()


def get_debt_payments_by_debt_id(*, debt_id: int) -> QuerySet:
    return _payments().filter(debt_id=debt_id)


@transaction.atomic
def create_debt_payment(
    *,
    debt_id: int,
    amount: Decimal,
    date: Optional[datetime] = None
) -> DebtPayment:
    """
    Record a payment and apply it to its debt.

    The debt row is locked for the duration of the transaction, so concurrent
    payments to the same debt are applied one after another. Paying more than
    the remaining amount is allowed; the debt then becomes inactive with a
    negative remainder.

    Raises:
        DebtNotFoundError: If the debt does not exist
    """
    try:
        debt = Debt.objects.select_for_update().get(id=debt_id)
    except Debt.DoesNotExist:
        raise DebtNotFoundError(f"Debt with id {debt_id} not found")

    payment = DebtPayment.objects.create(
        debt=debt,
        amount=amount,
        date=date or timezone.now(),
    )

    debt.paid_amount = debt.paid_amount + amount
    debt.remaining_amount = debt.total_amount - debt.paid_amount
    debt.active = debt.remaining_amount > 0
    debt.save(update_fields=['paid_amount', 'remaining_amount', 'active'])

    logger.info(
        "Recorded payment %s of %s to debt %s, %s remaining",
        payment.id, amount, debt.id, debt.remaining_amount
    )
    return payment
