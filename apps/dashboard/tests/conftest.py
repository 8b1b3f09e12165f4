from datetime import datetime

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from apps.accounts.services import issue_tokens
from apps.people.models import Person, PersonType, Role


def local(*args):
    """Aware datetime in the event time zone."""
    return timezone.make_aware(datetime(*args))


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
