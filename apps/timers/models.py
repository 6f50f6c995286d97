from django.db import models
from django.core.validators import MinValueValidator

from apps.worklogs.models import Person, Activity


class TimerStatus(models.TextChoices):
    RUNNING = 'running', 'Running'
    PAUSED = 'paused', 'Paused'
    STOPPED = 'stopped', 'Stopped'


class TimerSession(models.Model):
    """
    Stopwatch state persisted so a running timer survives a page reload.

    serialized_state is opaque to the server.
    """

    person = models.ForeignKey(
        Person,
        on_delete=models.PROTECT,
        related_name='timer_sessions'
    )
    activity = models.ForeignKey(
        Activity,
        on_delete=models.PROTECT,
        related_name='timer_sessions'
    )
    start_time = models.DateTimeField()
    status = models.CharField(max_length=10, choices=TimerStatus.choices)
    paused_duration_seconds = models.PositiveIntegerField(default=0)
    serialized_state = models.JSONField(null=True, blank=True)

    class Meta:
        db_table = 'timer_sessions'
        indexes = [
            models.Index(fields=['status'], name='timer_sessions_status_idx'),
        ]
        ordering = ['id']

    def __str__(self):
        return f"{self.person} - {self.activity} ({self.status})"
