# Generated manually for the people app

import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Person',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('email', models.EmailField(blank=True, max_length=255, null=True, unique=True)),
                ('phone', models.CharField(blank=True, max_length=32, null=True)),
                ('type', models.CharField(choices=[('MEMBER', 'Member'), ('VISITOR', 'Visitor'), ('LEADER', 'Leader'), ('PASTOR', 'Pastor'), ('STAFF', 'Staff')], default='VISITOR', max_length=10)),
                ('role', models.CharField(choices=[('STAFF', 'Staff'), ('PARTICIPANT', 'Participant')], default='PARTICIPANT', max_length=12)),
                ('church', models.CharField(blank=True, max_length=120, null=True)),
                ('gender', models.CharField(blank=True, choices=[('M', 'Male'), ('F', 'Female')], max_length=1, null=True)),
                ('age', models.PositiveIntegerField(blank=True, null=True)),
                ('department', models.CharField(blank=True, max_length=120, null=True)),
                ('marketing_source', models.CharField(blank=True, max_length=200, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'people',
                'ordering': ['name'],
                'indexes': [
                    models.Index(fields=['name'], name='people_name_idx'),
                    models.Index(fields=['created_at'], name='people_created_idx'),
                ],
            },
        ),
    ]
