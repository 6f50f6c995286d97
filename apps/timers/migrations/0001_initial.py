# Generated manually for the timers app

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('worklogs', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='TimerSession',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('start_time', models.DateTimeField()),
                ('status', models.CharField(choices=[('running', 'Running'), ('paused', 'Paused'), ('stopped', 'Stopped')], max_length=10)),
                ('paused_duration_seconds', models.PositiveIntegerField(default=0)),
                ('serialized_state', models.JSONField(blank=True, null=True)),
                ('activity', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='timer_sessions', to='worklogs.activity')),
                ('person', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='timer_sessions', to='worklogs.person')),
            ],
            options={
                'db_table': 'timer_sessions',
                'ordering': ['id'],
                'indexes': [
                    models.Index(fields=['status'], name='timer_sessions_status_idx'),
                ],
            },
        ),
    ]
