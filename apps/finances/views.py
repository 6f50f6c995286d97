from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    FinanceSerializer,
    FinanceFilterSerializer,
    FinanceChartsSerializer,
)
from .services import (
    get_all_finances,
    get_finances_by_type,
    get_finances_by_currency,
    create_finance,
    FinanceCharts,
)


class FinanceViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    ViewSet for ledger entries.

    list: All entries, newest first (filter by type / currency)
    create: Record income or expense
    charts: Monthly and per-currency series
    """

    serializer_class = FinanceSerializer

    def get_queryset(self):
        filter_serializer = FinanceFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if 'type' in params:
            queryset = get_finances_by_type(finance_type=params['type'])
            if 'currency' in params:
                queryset = queryset.filter(currency=params['currency'])
        elif 'currency' in params:
            queryset = get_finances_by_currency(currency=params['currency'])
        else:
            queryset = get_all_finances()

        return queryset

    def create(self, request, *args, **kwargs):
        serializer = FinanceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        finance = create_finance(**serializer.validated_data)

        return Response(
            FinanceSerializer(finance).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(responses={200: FinanceChartsSerializer})
    @action(detail=False, methods=['get'])
    def charts(self, request):
        """
        Monthly income/expenses and per-day currency balances.

        GET /api/finances/charts
        """
        return Response(FinanceCharts.all_series())
