from decimal import Decimal

from rest_framework import serializers
from .models import Debt, DebtPayment


# =============================================================================
# Input Serializers
# =============================================================================

class DebtCreateSerializer(serializers.Serializer):
    """
    Validate input for creating a debt.

    remainingAmount may be omitted; when given it must equal
    totalAmount - paidAmount.
    """

    name = serializers.CharField(max_length=200)
    totalAmount = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0.00')
    )
    paidAmount = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0.00'),
        required=False, default=Decimal('0.00')
    )
    remainingAmount = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False
    )


class DebtUpdateSerializer(serializers.Serializer):
    """Partial update: rename a debt or change its total."""

    name = serializers.CharField(max_length=200, required=False)
    totalAmount = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0.00'), required=False
    )


class DebtPaymentFilterSerializer(serializers.Serializer):
    debtId = serializers.IntegerField(required=False, min_value=1)


class DebtPaymentCreateSerializer(serializers.Serializer):
    debtId = serializers.IntegerField(min_value=1)
    amount = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0.01')
    )
    date = serializers.DateTimeField(required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class DebtSerializer(serializers.ModelSerializer):
    totalAmount = serializers.DecimalField(
        source='total_amount', max_digits=12, decimal_places=2, read_only=True
    )
    remainingAmount = serializers.DecimalField(
        source='remaining_amount', max_digits=12, decimal_places=2, read_only=True
    )
    paidAmount = serializers.DecimalField(
        source='paid_amount', max_digits=12, decimal_places=2, read_only=True
    )
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Debt
        fields = [
            'id',
            'name',
            'totalAmount',
            'remainingAmount',
            'paidAmount',
            'active',
            'createdAt',
        ]
        read_only_fields = fields


class DebtPaymentSerializer(serializers.ModelSerializer):
    """Payment enriched with the name of its debt."""

    debtId = serializers.IntegerField(source='debt_id', read_only=True)
    debtName = serializers.CharField(source='debt.name', read_only=True)

    class Meta:
        model = DebtPayment
        fields = ['id', 'debtId', 'amount', 'date', 'debtName']
        read_only_fields = fields


class DebtStatsItemSerializer(serializers.Serializer):
    name = serializers.CharField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    color = serializers.CharField()


class DebtStatsSerializer(serializers.Serializer):
    totalDebt = serializers.DecimalField(source='total_debt', max_digits=14, decimal_places=2)
    totalPaid = serializers.DecimalField(source='total_paid', max_digits=14, decimal_places=2)
    debts = DebtStatsItemSerializer(many=True)
