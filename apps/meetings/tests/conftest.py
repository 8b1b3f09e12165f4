from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from apps.accounts.services import issue_tokens
from apps.meetings.models import Meeting, MeetingType
from apps.people.models import Person, PersonType, Role


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def staff(db):
    return Person.objects.create(
        name='Ana Staff',
        email='ana.staff@example.com',
        type=PersonType.STAFF,
        role=Role.STAFF,
    )


@pytest.fixture
def staff_client(staff):
    """Return an API client authenticated as staff."""
    client = APIClient()
    tokens = issue_tokens(staff)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")
    return client


@pytest.fixture
def past_meeting(db):
    """Scheduled meeting whose date already passed."""
    return Meeting.objects.create(
        title='Alinhamento da recepção',
        date=timezone.now() - timedelta(days=2),
        type=MeetingType.SCHEDULED,
    )


@pytest.fixture
def future_meeting(db):
    return Meeting.objects.create(
        title='Ensaio do louvor',
        date=timezone.now() + timedelta(days=3),
        type=MeetingType.SCHEDULED,
    )
