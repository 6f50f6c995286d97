from decimal import Decimal

from rest_framework import serializers
from .models import Finance, FinanceType, Currency


class FinanceFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for finance listing.

    Query Parameters:
        type (str): income or expense
        currency (str): CZK, EUR or USD
    """

    type = serializers.ChoiceField(choices=FinanceType.choices, required=False)
    currency = serializers.ChoiceField(choices=Currency.choices, required=False)


class FinanceSerializer(serializers.ModelSerializer):
    """Ledger entry; used for both input and output."""

    amount = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0.00')
    )
    offsetByEarnings = serializers.DecimalField(
        source='offset_by_earnings',
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.00'),
        required=False,
    )
    date = serializers.DateTimeField(required=False)

    class Meta:
        model = Finance
        fields = [
            'id',
            'amount',
            'currency',
            'description',
            'type',
            'category',
            'date',
            'offsetByEarnings',
        ]
        read_only_fields = ['id']
        extra_kwargs = {
            'category': {'required': False, 'allow_null': True},
        }


class MonthlyPointSerializer(serializers.Serializer):
    name = serializers.CharField()
    income = serializers.DecimalField(max_digits=14, decimal_places=2)
    expenses = serializers.DecimalField(max_digits=14, decimal_places=2)
    deduction = serializers.DecimalField(max_digits=14, decimal_places=2)


class CurrencyPointSerializer(serializers.Serializer):
    name = serializers.CharField()
    CZK = serializers.DecimalField(max_digits=14, decimal_places=2)
    EUR = serializers.DecimalField(max_digits=14, decimal_places=2)
    USD = serializers.DecimalField(max_digits=14, decimal_places=2)


class FinanceChartsSerializer(serializers.Serializer):
    monthly = MonthlyPointSerializer(many=True)
    currencies = CurrencyPointSerializer(many=True)
