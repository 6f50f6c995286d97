import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from apps.timers.models import TimerSession
from apps.timers.services import (
    get_current_timer_session,
    update_timer_session,
    TimerSessionNotFoundError,
)


@pytest.mark.django_db
class TestCurrentTimerSession:
    """Tests for GET /api/timer-sessions/current"""

    def test_no_session_returns_null(self, api_client, db):
        url = reverse('timers:timersession-current')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.content == b'null'

    def test_only_stopped_sessions_returns_null(self, api_client, make_session):
        make_session('stopped')

        url = reverse('timers:timersession-current')
        response = api_client.get(url)

        assert response.json() is None

    def test_returns_first_not_stopped(self, api_client, make_session):
        make_session('stopped')
        paused = make_session('paused', paused_duration_seconds=120)
        make_session('running')

        url = reverse('timers:timersession-current')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == paused.id
        assert response.data['status'] == 'paused'
        assert response.data['pausedDurationSeconds'] == 120


@pytest.mark.django_db
class TestCreateTimerSession:
    """Tests for POST /api/timer-sessions"""

    def test_create_session(self, api_client, person, activity):
        url = reverse('timers:timersession-list')
        data = {
            'personId': person.id,
            'activityId': activity.id,
            'startTime': timezone.now().isoformat(),
            'status': 'running',
            'serializedState': {'laps': [], 'elapsed': 0},
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['pausedDurationSeconds'] == 0
        assert response.data['serializedState'] == {'laps': [], 'elapsed': 0}

        session = TimerSession.objects.get(id=response.data['id'])
        assert session.person == person

    def test_create_rejects_unknown_status(self, api_client, person, activity):
        url = reverse('timers:timersession-list')
        data = {
            'personId': person.id,
            'activityId': activity.id,
            'startTime': timezone.now().isoformat(),
            'status': 'lost',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'status' in response.data['errors']

    def test_create_requires_person(self, api_client, activity):
        url = reverse('timers:timersession-list')
        data = {
            'activityId': activity.id,
            'startTime': timezone.now().isoformat(),
            'status': 'running',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'personId' in response.data['errors']


@pytest.mark.django_db
class TestUpdateTimerSession:
    """Tests for PATCH /api/timer-sessions/{id}"""

    def test_pause_session(self, api_client, make_session):
        session = make_session('running', serialized_state={'elapsed': 10})

        url = reverse('timers:timersession-detail', kwargs={'pk': session.id})
        response = api_client.patch(
            url, {'status': 'paused', 'pausedDurationSeconds': 30}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'paused'
        assert response.data['pausedDurationSeconds'] == 30
        # Untouched fields survive the merge
        assert response.data['serializedState'] == {'elapsed': 10}

    def test_stop_session_clears_current(self, api_client, make_session):
        session = make_session('running')

        url = reverse('timers:timersession-detail', kwargs={'pk': session.id})
        api_client.patch(url, {'status': 'stopped'}, format='json')

        assert get_current_timer_session() is None

    def test_update_missing_session(self, api_client, db):
        url = reverse('timers:timersession-detail', kwargs={'pk': 999})
        response = api_client.patch(url, {'status': 'stopped'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Timer session with id 999 not found'}

    def test_service_ignores_unknown_fields(self, make_session):
        session = make_session('running')

        updated = update_timer_session(session_id=session.id, data={'id': 5, 'color': 'red'})

        assert updated.id == session.id

    def test_service_missing_session(self, db):
        with pytest.raises(TimerSessionNotFoundError):
            update_timer_session(session_id=999, data={})
