from rest_framework import serializers

from apps.worklogs.models import Person, Activity
from .models import TimerSession, TimerStatus


class TimerSessionInputSerializer(serializers.Serializer):
    """
    Validate input for starting or updating a timer session.

    Used with partial=True for PATCH, where every field is optional.
    """

    personId = serializers.PrimaryKeyRelatedField(
        source='person', queryset=Person.objects.all()
    )
    activityId = serializers.PrimaryKeyRelatedField(
        source='activity', queryset=Activity.objects.all()
    )
    startTime = serializers.DateTimeField(source='start_time')
    status = serializers.ChoiceField(choices=TimerStatus.choices)
    pausedDurationSeconds = serializers.IntegerField(
        source='paused_duration_seconds', min_value=0, required=False
    )
    serializedState = serializers.JSONField(
        source='serialized_state', required=False, allow_null=True
    )


class TimerSessionSerializer(serializers.ModelSerializer):
    personId = serializers.IntegerField(source='person_id', read_only=True)
    activityId = serializers.IntegerField(source='activity_id', read_only=True)
    startTime = serializers.DateTimeField(source='start_time', read_only=True)
    pausedDurationSeconds = serializers.IntegerField(
        source='paused_duration_seconds', read_only=True
    )
    serializedState = serializers.JSONField(source='serialized_state', read_only=True)

    class Meta:
        model = TimerSession
        fields = [
            'id',
            'personId',
            'activityId',
            'startTime',
            'status',
            'pausedDurationSeconds',
            'serializedState',
        ]
        read_only_fields = fields
