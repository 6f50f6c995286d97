from django.contrib import admin
from apps.worklogs.models import Person, Activity, WorkLog


@admin.register(Person)
class PersonAdmin(admin.ModelAdmin):
    list_display = ['name', 'hourly_rate', 'deduction_rate']
    search_fields = ['name']


@admin.register(Activity)
class ActivityAdmin(admin.ModelAdmin):
    list_display = ['name', 'color']
    search_fields = ['name']


@admin.register(WorkLog)
class WorkLogAdmin(admin.ModelAdmin):
    """Admin interface for work logs."""

    list_display = [
        'person',
        'activity',
        'start_time',
        'end_time',
        'duration_minutes',
        'earnings',
        'deduction',
    ]
    list_filter = ['person', 'activity', 'start_time']
    date_hierarchy = 'start_time'
    readonly_fields = ['created_at']
    ordering = ['-start_time']
