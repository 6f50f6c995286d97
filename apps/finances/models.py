from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal


class FinanceType(models.TextChoices):
    INCOME = 'income', 'Income'
    EXPENSE = 'expense', 'Expense'


class Currency(models.TextChoices):
    CZK = 'CZK', 'Czech koruna'
    EUR = 'EUR', 'Euro'
    USD = 'USD', 'US dollar'


class Finance(models.Model):
    """
    Ledger entry, income or expense, in one currency.

    Amounts are always positive; the type decides the sign in charts.
    """

    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    currency = models.CharField(max_length=3, choices=Currency.choices)
    description = models.CharField(max_length=255)
    type = models.CharField(max_length=10, choices=FinanceType.choices)
    category = models.CharField(max_length=100, null=True, blank=True)
    date = models.DateTimeField(default=timezone.now)
    # Part of an income already covered by tracked earnings
    offset_by_earnings = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    class Meta:
        db_table = 'finances'
        indexes = [
            models.Index(fields=['date'], name='finances_date_idx'),
            models.Index(fields=['type', 'date'], name='finances_type_date_idx'),
            models.Index(fields=['currency', 'date'], name='finances_currency_date_idx'),
        ]
        ordering = ['-date', '-id']

    def __str__(self):
        return f"{self.description} ({self.type}, {self.amount} {self.currency})"
