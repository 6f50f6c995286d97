from django.contrib import admin
from apps.finances.models import Finance


@admin.register(Finance)
class FinanceAdmin(admin.ModelAdmin):
    """Admin interface for ledger entries."""

    list_display = [
        'description',
        'type',
        'amount',
        'currency',
        'category',
        'offset_by_earnings',
        'date',
    ]
    list_filter = ['type', 'currency', 'category', 'date']
    search_fields = ['description', 'category']
    date_hierarchy = 'date'
