# Generated manually for the worklogs app

from decimal import Decimal
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Person',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('hourly_rate', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('deduction_rate', models.DecimalField(decimal_places=4, max_digits=5, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
            ],
            options={
                'db_table': 'persons',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Activity',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('color', models.CharField(max_length=7, validators=[django.core.validators.RegexValidator('^#[0-9A-Fa-f]{6}$', 'Color must be a hex value like #A1B2C3')])),
            ],
            options={
                'db_table': 'activities',
                'verbose_name_plural': 'activities',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='WorkLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('start_time', models.DateTimeField()),
                ('end_time', models.DateTimeField()),
                ('duration_minutes', models.FloatField(validators=[django.core.validators.MinValueValidator(0.0)])),
                ('earnings', models.DecimalField(decimal_places=2, max_digits=12)),
                ('deduction', models.DecimalField(decimal_places=2, max_digits=12)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('activity', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='work_logs', to='worklogs.activity')),
                ('person', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='work_logs', to='worklogs.person')),
            ],
            options={
                'db_table': 'work_logs',
                'ordering': ['-start_time', '-id'],
                'indexes': [
                    models.Index(fields=['start_time'], name='work_logs_start_idx'),
                    models.Index(fields=['person', 'start_time'], name='work_logs_person_start_idx'),
                    models.Index(fields=['activity', 'start_time'], name='work_logs_activity_start_idx'),
                ],
            },
        ),
    ]
