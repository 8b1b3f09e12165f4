# ==========================================
# apps/meetings/models.py
# ==========================================

from django.db import models
import uuid

MEETING_COUNT_KEY = 'MEETING_COUNT'


class MeetingType(models.TextChoices):
    SCHEDULED = 'AGENDADA', 'Scheduled'
    HELD = 'REALIZADA', 'Held'


class Meeting(models.Model):
    """Volunteer team meeting."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    date = models.DateTimeField(db_index=True)
    type = models.CharField(max_length=10, choices=MeetingType.choices, default=MeetingType.SCHEDULED)
    notes = models.TextField(blank=True, default='')
    created_by = models.CharField(max_length=200, blank=True, default='')

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'meetings'
        ordering = ['-date']

    def __str__(self):
        return f"{self.title} ({self.date:%d/%m/%Y})"


class GlobalConfig(models.Model):
    """Key/value settings edited at runtime (e.g. the meeting counter)."""

    key = models.CharField(max_length=100, primary_key=True)
    value = models.CharField(max_length=500)

    class Meta:
        db_table = 'global_config'
        verbose_name = 'global config'
        verbose_name_plural = 'global config'

    def __str__(self):
        return f"{self.key}={self.value}"
