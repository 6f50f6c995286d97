from django.contrib import admin
from apps.debts.models import Debt, DebtPayment


class DebtPaymentInline(admin.TabularInline):
    """Read-only; payments go through create_debt_payment."""
    model = DebtPayment
    extra = 0
    fields = ['amount', 'date']
    readonly_fields = ['amount', 'date']
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Debt)
class DebtAdmin(admin.ModelAdmin):
    """Admin interface for debts."""

    list_display = [
        'name',
        'total_amount',
        'paid_amount',
        'remaining_amount',
        'active',
        'created_at',
    ]
    list_filter = ['active']
    search_fields = ['name']
    readonly_fields = ['remaining_amount', 'active', 'created_at']
    inlines = [DebtPaymentInline]

    def save_model(self, request, obj, form, change):
        obj.remaining_amount = obj.total_amount - obj.paid_amount
        obj.active = obj.remaining_amount > 0
        super().save_model(request, obj, form, change)


@admin.register(DebtPayment)
class DebtPaymentAdmin(admin.ModelAdmin):
    list_display = ['debt', 'amount', 'date']
    list_filter = ['debt']
    date_hierarchy = 'date'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
