# ==========================================
# apps/people/models.py
# ==========================================

from django.db import models
import uuid


class PersonType(models.TextChoices):
    MEMBER = 'MEMBER', 'Member'
    VISITOR = 'VISITOR', 'Visitor'
    LEADER = 'LEADER', 'Leader'
    PASTOR = 'PASTOR', 'Pastor'
    STAFF = 'STAFF', 'Staff'


class Role(models.TextChoices):
    STAFF = 'STAFF', 'Staff'
    PARTICIPANT = 'PARTICIPANT', 'Participant'


class Gender(models.TextChoices):
    MALE = 'M', 'Male'
    FEMALE = 'F', 'Female'


class Person(models.Model):
    """Anyone known to the event: participants, visitors and staff."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    # Many people register at the altar or kids room without e-mail
    email = models.EmailField(unique=True, null=True, blank=True, max_length=255)
    phone = models.CharField(max_length=32, null=True, blank=True)

    type = models.CharField(max_length=10, choices=PersonType.choices, default=PersonType.VISITOR)
    role = models.CharField(max_length=12, choices=Role.choices, default=Role.PARTICIPANT)

    church = models.CharField(max_length=120, null=True, blank=True)
    gender = models.CharField(max_length=1, choices=Gender.choices, null=True, blank=True)
    age = models.PositiveIntegerField(null=True, blank=True)
    department = models.CharField(max_length=120, null=True, blank=True)
    marketing_source = models.CharField(max_length=200, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'people'
        indexes = [
            models.Index(fields=['name'], name='people_name_idx'),
            models.Index(fields=['created_at'], name='people_created_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def is_staff_member(self):
        return self.role == Role.STAFF

    @property
    def is_active(self):
        # Checked by simplejwt when issuing tokens
        return True
