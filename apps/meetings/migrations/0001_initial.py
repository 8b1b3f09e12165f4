# Generated manually for the meetings app

import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Meeting',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('date', models.DateTimeField(db_index=True)),
                ('type', models.CharField(choices=[('AGENDADA', 'Scheduled'), ('REALIZADA', 'Held')], default='AGENDADA', max_length=10)),
                ('notes', models.TextField(blank=True, default='')),
                ('created_by', models.CharField(blank=True, default='', max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'meetings',
                'ordering': ['-date'],
            },
        ),
        migrations.CreateModel(
            name='GlobalConfig',
            fields=[
                ('key', models.CharField(max_length=100, primary_key=True, serialize=False)),
                ('value', models.CharField(max_length=500)),
            ],
            options={
                'db_table': 'global_config',
                'verbose_name': 'global config',
                'verbose_name_plural': 'global config',
            },
        ),
    ]
