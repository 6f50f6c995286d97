import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.finances.models import Finance
from .conftest import local_dt


@pytest.mark.django_db
class TestFinanceList:
    """Tests for GET /api/finances"""

    def test_list_newest_first(self, api_client, demo_finances):
        url = reverse('finances:finance-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [f['id'] for f in response.data] == [
            demo_finances[2].id,
            demo_finances[1].id,
            demo_finances[0].id,
        ]
        assert response.data[-1]['offsetByEarnings'] == Decimal('1200.00')

    def test_filter_by_type(self, api_client, demo_finances):
        url = reverse('finances:finance-list')
        response = api_client.get(url, {'type': 'expense'})

        assert [f['description'] for f in response.data] == ['Nákup potravin']

    def test_filter_by_currency(self, api_client, demo_finances):
        url = reverse('finances:finance-list')
        response = api_client.get(url, {'currency': 'EUR'})

        assert [f['id'] for f in response.data] == [demo_finances[2].id]

    def test_filter_by_type_and_currency(self, api_client, demo_finances):
        url = reverse('finances:finance-list')
        response = api_client.get(url, {'type': 'income', 'currency': 'CZK'})

        assert [f['id'] for f in response.data] == [demo_finances[0].id]

    def test_filter_rejects_unknown_currency(self, api_client, db):
        url = reverse('finances:finance-list')
        response = api_client.get(url, {'currency': 'GBP'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'currency' in response.data['errors']


@pytest.mark.django_db
class TestFinanceCreate:
    """Tests for POST /api/finances"""

    def test_create_with_defaults(self, api_client, db):
        url = reverse('finances:finance-list')
        data = {
            'amount': '1500.00',
            'currency': 'CZK',
            'description': 'Nákup potravin',
            'type': 'expense',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['category'] is None
        assert response.data['offsetByEarnings'] == Decimal('0.00')
        assert response.data['date'] is not None

    def test_create_with_all_fields(self, api_client, db):
        url = reverse('finances:finance-list')
        data = {
            'amount': '5000',
            'currency': 'CZK',
            'description': 'Faktura za projekt',
            'type': 'income',
            'category': 'Práce',
            'date': local_dt(2026, 10, 1).isoformat(),
            'offsetByEarnings': '1200',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        finance = Finance.objects.get(id=response.data['id'])
        assert finance.offset_by_earnings == Decimal('1200.00')
        assert finance.date == local_dt(2026, 10, 1)

    def test_create_rejects_unknown_type(self, api_client, db):
        url = reverse('finances:finance-list')
        data = {
            'amount': '10',
            'currency': 'CZK',
            'description': 'Dar',
            'type': 'gift',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Invalid data'
        assert 'type' in response.data['errors']

    def test_create_rejects_unknown_currency(self, api_client, db):
        url = reverse('finances:finance-list')
        data = {
            'amount': '10',
            'currency': 'GBP',
            'description': 'Kniha',
            'type': 'expense',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'currency' in response.data['errors']
        assert not Finance.objects.exists()

    def test_create_rejects_negative_amount(self, api_client, db):
        url = reverse('finances:finance-list')
        data = {
            'amount': '-10',
            'currency': 'CZK',
            'description': 'Oprava',
            'type': 'expense',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Finance.objects.count() == 0


@pytest.mark.django_db
class TestFinanceCharts:
    """Tests for GET /api/finances/charts"""

    def test_charts_shape(self, api_client, demo_finances):
        url = reverse('finances:finance-charts')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['monthly']) == 1
        month = response.data['monthly'][0]
        assert month['income'] == Decimal('5200')
        assert month['expenses'] == Decimal('1500')
        assert month['deduction'] == Decimal('1200')

        assert len(response.data['currencies']) == 2
        assert set(response.data['currencies'][0]) == {'name', 'CZK', 'EUR', 'USD'}

    def test_charts_empty(self, api_client, db):
        url = reverse('finances:finance-charts')
        response = api_client.get(url)

        assert response.data == {'monthly': [], 'currencies': []}
