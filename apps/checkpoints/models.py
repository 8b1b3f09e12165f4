# ==========================================
# apps/checkpoints/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
import uuid

from apps.people.models import PersonType, Gender


class CheckpointCategory(models.TextChoices):
    GENERAL = 'GENERAL', 'General'
    KIDS = 'KIDS', 'Kids'
    PRAYER = 'PRAYER', 'Prayer'
    PROPHETIC = 'PROPHETIC', 'Prophetic'
    EVANGELISM = 'EVANGELISM', 'Evangelism'
    CONSOLIDATION = 'CONSOLIDATION', 'Consolidation'
    STORE = 'STORE', 'Store'


# People may go in and out of these rooms several times a day
SERVICE_CATEGORIES = frozenset({
    CheckpointCategory.PROPHETIC,
    CheckpointCategory.PRAYER,
    CheckpointCategory.EVANGELISM,
    CheckpointCategory.CONSOLIDATION,
    CheckpointCategory.STORE,
})


class AgeGroup(models.TextChoices):
    CHILD = 'CRIANCA', 'Child'
    YOUTH = 'JOVEM', 'Youth'
    ADULT = 'ADULTO', 'Adult'


class Checkpoint(models.Model):
    """Physical location of the event where attendance or sales are recorded."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=120, unique=True)
    category = models.CharField(
        max_length=16,
        choices=CheckpointCategory.choices,
        default=CheckpointCategory.GENERAL
    )

    class Meta:
        db_table = 'checkpoints'
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def allows_reentry(self):
        return self.category in SERVICE_CATEGORIES


class Movement(models.Model):
    """A person scanning in at a checkpoint."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    person = models.ForeignKey(
        'people.Person',
        on_delete=models.CASCADE,
        related_name='movements'
    )
    checkpoint = models.ForeignKey(
        Checkpoint,
        on_delete=models.CASCADE,
        related_name='movements'
    )
    timestamp = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'movements'
        indexes = [
            models.Index(fields=['person', 'checkpoint', 'timestamp'], name='movements_person_cp_ts_idx'),
        ]
        ordering = ['-timestamp']

    def __str__(self):
        return f"{self.person} @ {self.checkpoint}"


class ManualEntry(models.Model):
    """Headcount typed in by staff, not tied to an identified person."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    checkpoint = models.ForeignKey(
        Checkpoint,
        on_delete=models.CASCADE,
        related_name='manual_entries'
    )
    type = models.CharField(max_length=10, choices=PersonType.choices)
    church = models.CharField(max_length=120, null=True, blank=True)
    age_group = models.CharField(max_length=10, choices=AgeGroup.choices, null=True, blank=True)
    gender = models.CharField(max_length=1, choices=Gender.choices, null=True, blank=True)
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    marketing_source = models.CharField(max_length=200, null=True, blank=True)

    # Spiritual outcomes reported at the prayer rooms
    is_salvation = models.BooleanField(default=False)
    is_healing = models.BooleanField(default=False)
    is_deliverance = models.BooleanField(default=False)

    timestamp = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'manual_entries'
        verbose_name_plural = 'manual entries'
        indexes = [
            models.Index(fields=['checkpoint', 'type', 'timestamp'], name='manual_cp_type_ts_idx'),
        ]
        ordering = ['-timestamp']

    def __str__(self):
        return f"{self.quantity}x {self.type} @ {self.checkpoint}"
