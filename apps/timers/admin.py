from django.contrib import admin
from apps.timers.models import TimerSession


@admin.register(TimerSession)
class TimerSessionAdmin(admin.ModelAdmin):
    list_display = ['person', 'activity', 'start_time', 'status', 'paused_duration_seconds']
    list_filter = ['status', 'person', 'activity']
    ordering = ['-id']
