from rest_framework import viewsets, mixins, status, serializers
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    DebtSerializer,
    DebtCreateSerializer,
    DebtUpdateSerializer,
    DebtStatsSerializer,
    DebtPaymentSerializer,
    DebtPaymentCreateSerializer,
    DebtPaymentFilterSerializer,
)
from .services import (
    get_all_debts,
    get_debt_by_id,
    create_debt,
    update_debt,
    get_debt_stats,
    get_all_debt_payments,
    get_debt_payments_by_debt_id,
    create_debt_payment,
    DebtNotFoundError,
    InvalidDebtAmountsError,
)


class DebtViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    ViewSet for debts.

    list: All debts in creation order
    create: Create a debt
    retrieve: Get a specific debt
    partial_update: Rename a debt or change its total
    stats: Totals and remaining amounts for the dashboard
    """

    serializer_class = DebtSerializer
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        return get_all_debts()

    @extend_schema(request=DebtCreateSerializer, responses={201: DebtSerializer})
    def create(self, request, *args, **kwargs):
        serializer = DebtCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            debt = create_debt(
                name=data['name'],
                total_amount=data['totalAmount'],
                paid_amount=data['paidAmount'],
                remaining_amount=data.get('remainingAmount'),
            )
        except InvalidDebtAmountsError as e:
            raise serializers.ValidationError({'remainingAmount': [str(e)]})

        return Response(
            DebtSerializer(debt).data,
            status=status.HTTP_201_CREATED
        )

    def retrieve(self, request, pk=None):
        try:
            debt = get_debt_by_id(debt_id=int(pk))
        except DebtNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(DebtSerializer(debt).data)

    @extend_schema(request=DebtUpdateSerializer, responses={200: DebtSerializer})
    def partial_update(self, request, pk=None):
        serializer = DebtUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        changes = {}
        if 'name' in data:
            changes['name'] = data['name']
        if 'totalAmount' in data:
            changes['total_amount'] = data['totalAmount']

        try:
            debt = update_debt(debt_id=int(pk), data=changes)
        except DebtNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(DebtSerializer(debt).data)

    @extend_schema(responses={200: DebtStatsSerializer})
    @action(detail=False, methods=['get'])
    def stats(self, request):
        """
        Get total debt, total paid and remaining amount per debt.

        GET /api/debts/stats
        """
        return Response(DebtStatsSerializer(get_debt_stats()).data)


class DebtPaymentViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    ViewSet for debt payments.

    list: All payments, newest first, with debt names (filter by debtId)
    create: Record a payment and update the debt balance
    """

    serializer_class = DebtPaymentSerializer

    def get_queryset(self):
        filter_serializer = DebtPaymentFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if 'debtId' in params:
            return get_debt_payments_by_debt_id(debt_id=params['debtId'])
        return get_all_debt_payments()

    @extend_schema(request=DebtPaymentCreateSerializer, responses={201: DebtPaymentSerializer})
    def create(self, request, *args, **kwargs):
        serializer = DebtPaymentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            payment = create_debt_payment(
                debt_id=data['debtId'],
                amount=data['amount'],
                date=data.get('date'),
            )
        except DebtNotFoundError as e:
            raise serializers.ValidationError({'debtId': [str(e)]})

        return Response(
            DebtPaymentSerializer(payment).data,
            status=status.HTTP_201_CREATED
        )
