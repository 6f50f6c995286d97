from django.db import models
from django.core.validators import MinValueValidator, RegexValidator
from decimal import Decimal


class Person(models.Model):
    """Somebody whose work is tracked, with their pay rates."""

    name = models.CharField(max_length=100)
    hourly_rate = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    # Fraction of earnings withheld, e.g. 0.33
    deduction_rate = models.DecimalField(
        max_digits=5,
        decimal_places=4,
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    class Meta:
        db_table = 'persons'
        ordering = ['id']

    def __str__(self):
        return self.name


class Activity(models.Model):
    """Kind of work, shown with its colour in charts."""

    name = models.CharField(max_length=100)
    color = models.CharField(
        max_length=7,
        validators=[RegexValidator(r'^#[0-9A-Fa-f]{6}$', 'Color must be a hex value like #A1B2C3')]
    )

    class Meta:
        db_table = 'activities'
        verbose_name_plural = 'activities'
        ordering = ['id']

    def __str__(self):
        return self.name


class WorkLog(models.Model):
    """
    A recorded work interval.

    Duration, earnings and deduction are computed by the client from the
    person's rates and stored as given.
    """

    person = models.ForeignKey(
        Person,
        on_delete=models.PROTECT,
        related_name='work_logs'
    )
    activity = models.ForeignKey(
        Activity,
        on_delete=models.PROTECT,
        related_name='work_logs'
    )

    start_time = models.DateTimeField()
    end_time = models.DateTimeField()
    duration_minutes = models.FloatField(validators=[MinValueValidator(0.0)])

    earnings = models.DecimalField(max_digits=12, decimal_places=2)
    deduction = models.DecimalField(max_digits=12, decimal_places=2)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'work_logs'
        indexes = [
            models.Index(fields=['start_time'], name='work_logs_start_idx'),
            models.Index(fields=['person', 'start_time'], name='work_logs_person_start_idx'),
            models.Index(fields=['activity', 'start_time'], name='work_logs_activity_start_idx'),
        ]
        ordering = ['-start_time', '-id']

    def __str__(self):
        return f"{self.person} - {self.activity} ({self.duration_minutes:g} min)"
