import pytest
from decimal import Decimal
from io import StringIO
from django.core.management import call_command
from django.utils import timezone

from apps.accounts.models import User
from apps.debts.models import Debt, DebtPayment
from apps.finances.models import Finance
from apps.worklogs.models import WorkLog, Person, Activity
from apps.worklogs.services import get_work_logs_summary_for_day


@pytest.mark.django_db
class TestSeedDemoData:

    def test_creates_demo_data(self):
        out = StringIO()
        call_command('seed_demo_data', stdout=out)

        assert 'Demo data created successfully!' in out.getvalue()
        user = User.objects.get(username='demo@example.com')
        assert user.check_password('password')
        assert user.avatar_initials == 'MN'
        assert Person.objects.count() == 2
        assert Activity.objects.count() == 3
        assert WorkLog.objects.count() == 4
        assert Finance.objects.count() == 3
        assert Debt.objects.count() == 3
        assert DebtPayment.objects.count() == 3

    def test_today_totals(self):
        call_command('seed_demo_data', stdout=StringIO())

        summary = get_work_logs_summary_for_day(day=timezone.localdate())

        assert summary['work_time_minutes'] == 240.0
        assert summary['earnings'] == Decimal('1100')

    def test_payments_keep_debts_balanced(self):
        call_command('seed_demo_data', stdout=StringIO())

        car = Debt.objects.get(name='Půjčka na auto')
        assert car.paid_amount == Decimal('52300')
        for debt in Debt.objects.all():
            assert debt.remaining_amount == debt.total_amount - debt.paid_amount

    def test_clear_replaces_existing_data(self):
        call_command('seed_demo_data', stdout=StringIO())
        call_command('seed_demo_data', '--clear', stdout=StringIO())

        assert WorkLog.objects.count() == 4
        assert Debt.objects.count() == 3
        assert User.objects.filter(username='demo@example.com').count() == 1
