from django.http import JsonResponse
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import TimerSessionSerializer, TimerSessionInputSerializer
from .services import (
    get_current_timer_session,
    create_timer_session,
    update_timer_session,
    TimerSessionNotFoundError,
)


class TimerSessionViewSet(viewsets.GenericViewSet):
    """
    ViewSet for the dashboard stopwatch.

    current: The session that is not stopped, or null
    create: Start a session
    partial_update: Pause, resume or stop a session
    """

    serializer_class = TimerSessionSerializer
    lookup_value_regex = r'\d+'

    @extend_schema(responses={200: TimerSessionSerializer})
    @action(detail=False, methods=['get'])
    def current(self, request):
        """
        Get the current timer session.

        GET /api/timer-sessions/current
        """
        session = get_current_timer_session()
        if session is None:
            # JSON null body, not an empty one
            return JsonResponse(None, safe=False)

        return Response(TimerSessionSerializer(session).data)

    @extend_schema(request=TimerSessionInputSerializer, responses={201: TimerSessionSerializer})
    def create(self, request):
        serializer = TimerSessionInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        session = create_timer_session(**serializer.validated_data)

        return Response(
            TimerSessionSerializer(session).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(request=TimerSessionInputSerializer, responses={200: TimerSessionSerializer})
    def partial_update(self, request, pk=None):
        serializer = TimerSessionInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            session = update_timer_session(
                session_id=int(pk),
                data=serializer.validated_data
            )
        except TimerSessionNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(TimerSessionSerializer(session).data)
