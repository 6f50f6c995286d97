from decimal import Decimal

from rest_framework import serializers
from .models import Person, Activity, WorkLog


# =============================================================================
# Input Serializers
# =============================================================================

class WorkLogFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for work log listing.

    Query Parameters:
        personId (int): Only logs of this person
        activityId (int): Only logs of this activity
        startDate (date): Logs starting on or after this local day
        endDate (date): Logs starting on or before this local day
    """

    personId = serializers.IntegerField(required=False, min_value=1)
    activityId = serializers.IntegerField(required=False, min_value=1)
    startDate = serializers.DateField(required=False)
    endDate = serializers.DateField(required=False)

    def validate(self, attrs):
        """Validate date range."""
        start_date = attrs.get('startDate')
        end_date = attrs.get('endDate')

        if start_date and end_date and start_date > end_date:
            raise serializers.ValidationError({
                'endDate': 'End date must be after start date'
            })

        return attrs


class WorkLogCreateSerializer(serializers.Serializer):
    """
    Validate input for recording a work log.

    Fields:
        personId (int): Existing person
        activityId (int): Existing activity
        startTime / endTime (datetime): Interval, end not before start
        durationMinutes (float): Worked minutes as computed by the client
        earnings / deduction (decimal): Amounts as computed by the client
    """

    personId = serializers.PrimaryKeyRelatedField(queryset=Person.objects.all())
    activityId = serializers.PrimaryKeyRelatedField(queryset=Activity.objects.all())
    startTime = serializers.DateTimeField()
    endTime = serializers.DateTimeField()
    durationMinutes = serializers.FloatField(min_value=0)
    earnings = serializers.DecimalField(max_digits=12, decimal_places=2)
    deduction = serializers.DecimalField(max_digits=12, decimal_places=2)

    def validate(self, attrs):
        if attrs['endTime'] < attrs['startTime']:
            raise serializers.ValidationError({
                'endTime': 'End time must not be before start time'
            })
        return attrs


# =============================================================================
# Output Serializers
# =============================================================================

class PersonSerializer(serializers.ModelSerializer):
    """Person with pay rates; used for both input and output."""

    hourlyRate = serializers.DecimalField(
        source='hourly_rate', max_digits=10, decimal_places=2, min_value=Decimal('0.00')
    )
    deductionRate = serializers.DecimalField(
        source='deduction_rate', max_digits=5, decimal_places=4, min_value=Decimal('0.00')
    )

    class Meta:
        model = Person
        fields = ['id', 'name', 'hourlyRate', 'deductionRate']
        read_only_fields = ['id']


class ActivitySerializer(serializers.ModelSerializer):

    class Meta:
        model = Activity
        fields = ['id', 'name', 'color']
        read_only_fields = ['id']


class WorkLogSerializer(serializers.ModelSerializer):
    """Work log as returned by the API and written to exports."""

    personId = serializers.IntegerField(source='person_id', read_only=True)
    activityId = serializers.IntegerField(source='activity_id', read_only=True)
    startTime = serializers.DateTimeField(source='start_time', read_only=True)
    endTime = serializers.DateTimeField(source='end_time', read_only=True)
    durationMinutes = serializers.FloatField(source='duration_minutes', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = WorkLog
        fields = [
            'id',
            'personId',
            'activityId',
            'startTime',
            'endTime',
            'durationMinutes',
            'earnings',
            'deduction',
            'createdAt',
        ]
        read_only_fields = fields


# =============================================================================
# Response Serializers (summaries & charts)
# =============================================================================

class SummaryTotalsSerializer(serializers.Serializer):
    workTimeMinutes = serializers.FloatField(source='work_time_minutes')
    earnings = serializers.DecimalField(max_digits=14, decimal_places=2)
    deduction = serializers.DecimalField(max_digits=14, decimal_places=2)


class DaySummarySerializer(SummaryTotalsSerializer):
    date = serializers.CharField()


class WeekSummarySerializer(SummaryTotalsSerializer):
    range = serializers.CharField()


class MonthSummarySerializer(SummaryTotalsSerializer):
    name = serializers.CharField()


class WorkLogSummarySerializer(serializers.Serializer):
    """Dashboard cards: today, this week, this month."""

    today = DaySummarySerializer()
    week = WeekSummarySerializer()
    month = MonthSummarySerializer()


class ChartPointSerializer(serializers.Serializer):
    name = serializers.CharField()
    minutes = serializers.FloatField()
    earnings = serializers.DecimalField(max_digits=14, decimal_places=2)


class ActivityChartPointSerializer(ChartPointSerializer):
    color = serializers.CharField()


class WorkLogChartsSerializer(serializers.Serializer):
    byDay = ChartPointSerializer(many=True)
    byActivity = ActivityChartPointSerializer(many=True)
    byPerson = ChartPointSerializer(many=True)
