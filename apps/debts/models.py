from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal


class Debt(models.Model):
    """
    A liability paid off in instalments.

    remaining_amount == total_amount - paid_amount and
    active == (remaining_amount > 0) hold after every recorded payment.
    """

    name = models.CharField(max_length=200)
    total_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    remaining_amount = models.DecimalField(max_digits=12, decimal_places=2)
    paid_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00')
    )
    active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'debts'
        ordering = ['id']

    def __str__(self):
        return f"{self.name} ({self.remaining_amount} of {self.total_amount} left)"


class DebtPayment(models.Model):
    """One instalment towards a debt."""

    debt = models.ForeignKey(
        Debt,
        on_delete=models.PROTECT,
        related_name='payments'
    )
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'debt_payments'
        indexes = [
            models.Index(fields=['debt', 'date'], name='debt_payments_debt_date_idx'),
        ]
        ordering = ['-date', '-id']

    def __str__(self):
        return f"{self.amount} towards {self.debt.name}"
