import base64
import json
import re
import pytest
import requests
from datetime import datetime, timezone as dt_timezone
from unittest.mock import patch
from django.urls import reverse
from rest_framework import status

from apps.exports.services import export_filename
from .conftest import github_response

PUT = 'apps.exports.services.github_export.requests.put'


def decoded_payload(mock_put):
    body = mock_put.call_args.kwargs['json']
    return json.loads(base64.b64decode(body['content']).decode('utf-8'))


@pytest.mark.django_db
class TestGitHubExport:
    """Tests for POST /api/github/export"""

    def test_missing_parameters(self, api_client):
        url = reverse('exports:github-export')
        with patch(PUT) as mock_put:
            response = api_client.post(url, {'owner': 'marie'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data
        mock_put.assert_not_called()

    def test_successful_export(self, api_client, ledger, settings):
        settings.GITHUB_API_URL = 'https://api.github.com'
        html_url = 'https://github.com/marie/data/blob/main/export.json'
        url = reverse('exports:github-export')

        with patch(PUT, return_value=github_response(201, {'content': {'html_url': html_url}})) as mock_put:
            response = api_client.post(
                url, {'owner': 'marie', 'repo': 'data', 'token': 'ghp_secret'}, format='json'
            )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['url'] == html_url

        called_url = mock_put.call_args.args[0]
        assert re.fullmatch(
            r'https://api\.github\.com/repos/marie/data/contents/'
            r'export_\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}-\d{3}Z\.json',
            called_url,
        )
        headers = mock_put.call_args.kwargs['headers']
        assert headers['Authorization'] == 'token ghp_secret'
        assert headers['Accept'] == 'application/vnd.github.v3+json'
        body = mock_put.call_args.kwargs['json']
        assert body['branch'] == 'main'
        assert body['message'].startswith('Export dat z aplikace Píchačka - ')
        assert mock_put.call_args.kwargs['timeout'] == settings.GITHUB_EXPORT_TIMEOUT

    def test_custom_commit_message(self, api_client, ledger):
        url = reverse('exports:github-export')
        with patch(PUT, return_value=github_response(201, {})) as mock_put:
            response = api_client.post(
                url,
                {'owner': 'marie', 'repo': 'data', 'token': 't', 'message': 'Záloha'},
                format='json',
            )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['url'] is None
        assert mock_put.call_args.kwargs['json']['message'] == 'Záloha'

    def test_payload_matches_list_endpoints(self, api_client, ledger):
        url = reverse('exports:github-export')
        with patch(PUT, return_value=github_response(201, {})) as mock_put:
            api_client.post(url, {'owner': 'marie', 'repo': 'data', 'token': 't'}, format='json')

        payload = decoded_payload(mock_put)

        assert set(payload) == {'exportDate', 'workLogs', 'finances', 'debts'}
        assert payload['workLogs'] == api_client.get(reverse('worklogs:worklog-list')).json()
        assert payload['finances'] == api_client.get(reverse('finances:finance-list')).json()
        assert payload['debts'] == api_client.get(reverse('debts:debt-list')).json()
        assert payload['workLogs'][0]['earnings'] == 619.0
        assert payload['finances'][0]['description'] == 'Faktura za projekt'

    def test_upstream_error_is_passed_through(self, api_client, ledger):
        url = reverse('exports:github-export')
        upstream = {'message': 'Bad credentials'}
        with patch(PUT, return_value=github_response(401, upstream)):
            response = api_client.post(
                url, {'owner': 'marie', 'repo': 'data', 'token': 'wrong'}, format='json'
            )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['details'] == upstream
        assert 'error' in response.data

    def test_network_failure(self, api_client, ledger):
        url = reverse('exports:github-export')
        with patch(PUT, side_effect=requests.ConnectionError('connection refused')):
            response = api_client.post(
                url, {'owner': 'marie', 'repo': 'data', 'token': 't'}, format='json'
            )

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert 'connection refused' in response.data['details']['message']

    @pytest.mark.parametrize('field, value', [
        ('repo', 'data/contents/../../../x'),
        ('owner', 'marie/..'),
        ('repo', 'data?ref=dev'),
        ('repo', '..'),
    ])
    def test_rejects_unsafe_repository_names(self, api_client, ledger, field, value):
        url = reverse('exports:github-export')
        data = {'owner': 'marie', 'repo': 'data', 'token': 't'}
        data[field] = value
        with patch(PUT) as mock_put:
            response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert field in response.data['details']
        mock_put.assert_not_called()

    def test_accepts_dotted_repository_name(self, api_client, ledger):
        url = reverse('exports:github-export')
        with patch(PUT, return_value=github_response(201, {})) as mock_put:
            response = api_client.post(
                url, {'owner': 'marie-n', 'repo': 'pichacka_data.v2', 'token': 't'}, format='json'
            )

        assert response.status_code == status.HTTP_200_OK
        assert '/repos/marie-n/pichacka_data.v2/contents/' in mock_put.call_args.args[0]

    def test_non_object_success_body(self, api_client, ledger):
        url = reverse('exports:github-export')
        with patch(PUT, return_value=github_response(201, [])):
            response = api_client.post(
                url, {'owner': 'marie', 'repo': 'data', 'token': 't'}, format='json'
            )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['url'] is None


class TestExportFilename:

    def test_separators_are_replaced(self):
        moment = datetime(2026, 10, 16, 8, 30, 5, 123000, tzinfo=dt_timezone.utc)
        assert export_filename(moment) == 'export_2026-10-16T08-30-05-123Z.json'
