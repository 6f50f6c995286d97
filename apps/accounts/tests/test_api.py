import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User
from apps.accounts.services import get_user, get_user_by_username


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register"""

    def test_register_success(self, api_client):
        """Successfully register a new user."""
        url = reverse('accounts:register')
        data = {
            'username': 'newuser@example.com',
            'password': 'SecurePass123!',
            'displayName': 'Jan Novák',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['displayName'] == 'Jan Novák'
        assert response.data['user']['avatarInitials'] == 'JN'
        assert 'password' not in response.data['user']
        assert User.objects.filter(username='newuser@example.com').exists()

    def test_register_with_explicit_initials(self, api_client):
        """Supplied initials win over derived ones."""
        url = reverse('accounts:register')
        data = {
            'username': 'initials@example.com',
            'password': 'SecurePass123!',
            'displayName': 'Jan Novák',
            'avatarInitials': 'JX',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['user']['avatarInitials'] == 'JX'

    def test_register_duplicate_username(self, api_client, user):
        """Cannot register with an existing username."""
        url = reverse('accounts:register')
        data = {
            'username': user.username,
            'password': 'SecurePass123!',
            'displayName': 'Somebody Else',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_register_missing_fields(self, api_client):
        """Missing fields produce the generic validation message."""
        url = reverse('accounts:register')
        response = api_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Invalid data'
        assert 'username' in response.data['errors']

    def test_register_weak_password(self, api_client):
        """Registration fails with weak password."""
        url = reverse('accounts:register')
        data = {
            'username': 'weak@example.com',
            'password': '123',
            'displayName': 'Weak',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password' in response.data['errors']


# =============================================================================
# Login / Logout Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login"""

    def test_login_success(self, api_client, user):
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'username': 'demo@example.com',
            'password': 'TestPass123!',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['username'] == 'demo@example.com'
        assert 'access' in response.data['tokens']

        user.refresh_from_db()
        assert user.last_login is not None

    def test_login_wrong_password(self, api_client, user):
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'username': 'demo@example.com',
            'password': 'WrongPass123!',
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_unknown_user(self, api_client, db):
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'username': 'nobody@example.com',
            'password': 'TestPass123!',
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_user(self, api_client, user_inactive):
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'username': 'inactive@example.com',
            'password': 'TestPass123!',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_logout(self, authenticated_client):
        url = reverse('accounts:logout')
        response = authenticated_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_200_OK

    def test_logout_with_invalid_refresh(self, authenticated_client):
        url = reverse('accounts:logout')
        response = authenticated_client.post(url, {'refresh': 'garbage'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/auth/user"""

    def test_current_user(self, authenticated_client, user):
        url = reverse('accounts:current-user')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == user.id
        assert response.data['avatarInitials'] == 'MN'

    def test_current_user_unauthenticated(self, api_client):
        url = reverse('accounts:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestUserLookup:
    """Tests for the user lookup services."""

    def test_get_user(self, user):
        assert get_user(user_id=user.id) == user
        assert get_user(user_id=user.id + 100) is None

    def test_get_user_by_username(self, user):
        assert get_user_by_username(username='demo@example.com') == user
        assert get_user_by_username(username='missing@example.com') is None
