"""
Management command to create demo data for the dashboard.

Usage:
    python manage.py seed_demo_data [--clear]

This creates:
- The demo user (demo@example.com / password)
- 2 persons and 3 activities
- 4 work logs (two today, two yesterday)
- 3 finance entries
- 3 debts and 3 payments
"""

from datetime import datetime, time, timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.debts.models import Debt, DebtPayment
from apps.debts.services import create_debt, create_debt_payment
from apps.finances.models import Finance
from apps.finances.services import create_finance
from apps.timers.models import TimerSession
from apps.worklogs.models import Person, Activity, WorkLog
from apps.worklogs.services import create_person, create_activity, create_work_log

User = get_user_model()

DEMO_USERNAME = 'demo@example.com'


class Command(BaseCommand):
    help = 'Create demo data for the dashboard'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating demo data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating demo data...')

        self.create_user()
        persons, activities = self.create_catalog()
        self.create_work_logs(persons, activities)
        self.create_finances()
        self.create_debts()

        self.stdout.write(self.style.SUCCESS('Demo data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Demo account:')
        self.stdout.write(f'  {DEMO_USERNAME} / password')

    def clear_data(self):
        """Remove ledger data and the demo user."""
        DebtPayment.objects.all().delete()
        Debt.objects.all().delete()
        TimerSession.objects.all().delete()
        WorkLog.objects.all().delete()
        Finance.objects.all().delete()
        Person.objects.all().delete()
        Activity.objects.all().delete()
        User.objects.filter(username=DEMO_USERNAME).delete()

    def create_user(self):
        self.stdout.write('  Creating demo user...')

        user, _ = User.objects.get_or_create(
            username=DEMO_USERNAME,
            defaults={
                'display_name': 'Marie Nováková',
                'avatar_initials': 'MN',
            }
        )
        user.set_password('password')
        user.save()
        return user

    def create_catalog(self):
        self.stdout.write('  Creating persons and activities...')

        persons = [
            create_person(name='Marie', hourly_rate=Decimal('275.00'), deduction_rate=Decimal('0.3333')),
            create_person(name='Tomáš', hourly_rate=Decimal('320.00'), deduction_rate=Decimal('0.1500')),
        ]
        activities = [
            create_activity(name='Programování', color='#B39DDB'),
            create_activity(name='Konzultace', color='#FFCC80'),
            create_activity(name='Administrativa', color='#FFF59D'),
        ]
        return persons, activities

    def create_work_logs(self, persons, activities):
        self.stdout.write('  Creating work logs...')

        today = timezone.localdate()
        yesterday = today - timedelta(days=1)
        marie = persons[0]

        # (day, start, end, minutes, earnings, deduction, activity)
        rows = [
            (today, time(9, 0), time(11, 15), 135, '619', '206', activities[0]),
            (today, time(13, 0), time(14, 45), 105, '481', '160', activities[1]),
            (yesterday, time(10, 0), time(11, 0), 60, '275', '92', activities[2]),
            (yesterday, time(14, 0), time(17, 30), 210, '963', '321', activities[0]),
        ]
        for day, start, end, minutes, earnings, deduction, activity in rows:
            create_work_log(
                person=marie,
                activity=activity,
                start_time=timezone.make_aware(datetime.combine(day, start)),
                end_time=timezone.make_aware(datetime.combine(day, end)),
                duration_minutes=minutes,
                earnings=Decimal(earnings),
                deduction=Decimal(deduction),
            )

    def create_finances(self):
        self.stdout.write('  Creating finances...')

        create_finance(
            amount=Decimal('5000'),
            currency='CZK',
            description='Faktura za projekt',
            type='income',
            category='Práce',
            offset_by_earnings=Decimal('1200'),
        )
        create_finance(
            amount=Decimal('1500'),
            currency='CZK',
            description='Nákup potravin',
            type='expense',
            category='Jídlo',
        )
        create_finance(
            amount=Decimal('200'),
            currency='EUR',
            description='Platba za služby',
            type='income',
            category='Práce',
        )

    def create_debts(self):
        self.stdout.write('  Creating debts and payments...')

        car = create_debt(
            name='Půjčka na auto',
            total_amount=Decimal('78500'),
            paid_amount=Decimal('42300'),
        )
        card = create_debt(
            name='Kreditní karta',
            total_amount=Decimal('22400'),
            paid_amount=Decimal('14560'),
        )
        create_debt(
            name='Půjčka od rodičů',
            total_amount=Decimal('30000'),
            paid_amount=Decimal('6000'),
        )

        now = timezone.now()
        create_debt_payment(debt_id=car.id, amount=Decimal('5000'), date=now - timedelta(days=30))
        create_debt_payment(debt_id=car.id, amount=Decimal('5000'), date=now - timedelta(days=60))
        create_debt_payment(debt_id=card.id, amount=Decimal('2000'), date=now - timedelta(days=15))
