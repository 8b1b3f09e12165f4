import pytest
from rest_framework.test import APIClient

from apps.accounts.services import issue_tokens
from apps.people.models import Person, PersonType, Role


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def staff(db):
    """Create and return a staff member."""
    return Person.objects.create(
        name='Ana Staff',
        email='ana.staff@example.com',
        type=PersonType.STAFF,
        role=Role.STAFF,
    )


@pytest.fixture
def participant(db):
    """Create and return a regular participant."""
    return Person.objects.create(
        name='Joao Visitante',
        email='joao@example.com',
        type=PersonType.VISITOR,
    )


@pytest.fixture
def staff_client(api_client, staff):
    """Return an API client authenticated as staff."""
    tokens = issue_tokens(staff)
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")
    return api_client


@pytest.fixture
def participant_client(participant):
    """Return an API client authenticated with a non-staff token."""
    client = APIClient()
    tokens = issue_tokens(participant)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")
    return client
