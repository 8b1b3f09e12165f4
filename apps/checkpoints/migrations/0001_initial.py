# Generated manually for the checkpoints app

import uuid
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('people', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Checkpoint',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=120, unique=True)),
                ('category', models.CharField(choices=[('GENERAL', 'General'), ('KIDS', 'Kids'), ('PRAYER', 'Prayer'), ('PROPHETIC', 'Prophetic'), ('EVANGELISM', 'Evangelism'), ('CONSOLIDATION', 'Consolidation'), ('STORE', 'Store')], default='GENERAL', max_length=16)),
            ],
            options={
                'db_table': 'checkpoints',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Movement',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('timestamp', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('checkpoint', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='movements', to='checkpoints.checkpoint')),
                ('person', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='movements', to='people.person')),
            ],
            options={
                'db_table': 'movements',
                'ordering': ['-timestamp'],
                'indexes': [
                    models.Index(fields=['person', 'checkpoint', 'timestamp'], name='movements_person_cp_ts_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ManualEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('type', models.CharField(choices=[('MEMBER', 'Member'), ('VISITOR', 'Visitor'), ('LEADER', 'Leader'), ('PASTOR', 'Pastor'), ('STAFF', 'Staff')], max_length=10)),
                ('church', models.CharField(blank=True, max_length=120, null=True)),
                ('age_group', models.CharField(blank=True, choices=[('CRIANCA', 'Child'), ('JOVEM', 'Youth'), ('ADULTO', 'Adult')], max_length=10, null=True)),
                ('gender', models.CharField(blank=True, choices=[('M', 'Male'), ('F', 'Female')], max_length=1, null=True)),
                ('quantity', models.PositiveIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1)])),
                ('marketing_source', models.CharField(blank=True, max_length=200, null=True)),
                ('is_salvation', models.BooleanField(default=False)),
                ('is_healing', models.BooleanField(default=False)),
                ('is_deliverance', models.BooleanField(default=False)),
                ('timestamp', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('checkpoint', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='manual_entries', to='checkpoints.checkpoint')),
            ],
            options={
                'db_table': 'manual_entries',
                'verbose_name_plural': 'manual entries',
                'ordering': ['-timestamp'],
                'indexes': [
                    models.Index(fields=['checkpoint', 'type', 'timestamp'], name='manual_cp_type_ts_idx'),
                ],
            },
        ),
    ]
