from django.conf import settings
from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    WorkLogSerializer,
    WorkLogCreateSerializer,
    WorkLogFilterSerializer,
    WorkLogSummarySerializer,
    WorkLogChartsSerializer,
    PersonSerializer,
    ActivitySerializer,
)
from .services import (
    get_all_work_logs,
    get_recent_work_logs,
    get_work_logs_by_person_id,
    get_work_logs_by_activity_id,
    get_work_logs_by_date_range,
    get_work_log_by_id,
    create_work_log,
    get_all_persons,
    create_person,
    get_all_activities,
    create_activity,
    get_dashboard_summary,
    WorkLogCharts,
    WorkLogNotFoundError,
)
from .services.periods import day_bounds


class WorkLogViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    ViewSet for work logs.

    list: All work logs, most recent first (filterable)
    create: Record a work log
    retrieve: Get a specific work log
    recent: The most recent work logs
    summary: Today / week / month totals
    charts: Series grouped by day, activity and person
    """

    serializer_class = WorkLogSerializer
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        """Filter work logs using input serializer validation."""
        filter_serializer = WorkLogFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if 'startDate' in params or 'endDate' in params:
            queryset = get_work_logs_by_date_range(
                start=day_bounds(params['startDate'])[0] if 'startDate' in params else None,
                end=day_bounds(params['endDate'])[1] if 'endDate' in params else None,
            )
        else:
            queryset = get_all_work_logs()

        if 'personId' in params:
            queryset &= get_work_logs_by_person_id(person_id=params['personId'])
        if 'activityId' in params:
            queryset &= get_work_logs_by_activity_id(activity_id=params['activityId'])

        return queryset

    @extend_schema(request=WorkLogCreateSerializer, responses={201: WorkLogSerializer})
    def create(self, request, *args, **kwargs):
        """Record a new work log."""
        serializer = WorkLogCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        work_log = create_work_log(
            person=data['personId'],
            activity=data['activityId'],
            start_time=data['startTime'],
            end_time=data['endTime'],
            duration_minutes=data['durationMinutes'],
            earnings=data['earnings'],
            deduction=data['deduction'],
        )

        return Response(
            WorkLogSerializer(work_log).data,
            status=status.HTTP_201_CREATED
        )

    def retrieve(self, request, pk=None):
        try:
            work_log = get_work_log_by_id(work_log_id=int(pk))
        except WorkLogNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(WorkLogSerializer(work_log).data)

    @extend_schema(responses={200: WorkLogSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def recent(self, request):
        """
        Get the most recent work logs.

        GET /api/work-logs/recent
        """
        work_logs = get_recent_work_logs(limit=settings.WORKLOG_RECENT_LIMIT)
        return Response(WorkLogSerializer(work_logs, many=True).data)

    @extend_schema(responses={200: WorkLogSummarySerializer})
    @action(detail=False, methods=['get'])
    def summary(self, request):
        """
        Get today / this week / this month totals.

        GET /api/work-logs/summary
        """
        summary = get_dashboard_summary()
        return Response(WorkLogSummarySerializer(summary).data)

    @extend_schema(responses={200: WorkLogChartsSerializer})
    @action(detail=False, methods=['get'])
    def charts(self, request):
        """
        Get chart series grouped by day, activity and person.

        GET /api/work-logs/charts
        """
        return Response(WorkLogCharts.all_series())


class PersonViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """List and create persons."""

    serializer_class = PersonSerializer

    def get_queryset(self):
        return get_all_persons()

    def create(self, request, *args, **kwargs):
        serializer = PersonSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        person = create_person(**serializer.validated_data)

        return Response(
            PersonSerializer(person).data,
            status=status.HTTP_201_CREATED
        )


class ActivityViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """List and create activities."""

    serializer_class = ActivitySerializer

    def get_queryset(self):
        return get_all_activities()

    def create(self, request, *args, **kwargs):
        serializer = ActivitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        activity = create_activity(**serializer.validated_data)

        return Response(
            ActivitySerializer(activity).data,
            status=status.HTTP_201_CREATED
        )
