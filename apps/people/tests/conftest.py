import pytest
from rest_framework.test import APIClient

from apps.accounts.services import issue_tokens
from apps.checkpoints.models import Checkpoint, CheckpointCategory
from apps.people.models import Person, PersonType, Role, Gender


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
def person(db):
    """A complete member record."""
    return Person.objects.create(
        name='Maria Souza',
        email='maria@example.com',
        phone='31999990000',
        type=PersonType.MEMBER,
        church='Ibmg Sede',
        gender=Gender.FEMALE,
        age=34,
        marketing_source='Instagram',
    )


@pytest.fixture
def incomplete_person(db):
    """Visitor registered without phone, gender or age."""
    return Person.objects.create(name='Pedro Lima', type=PersonType.VISITOR)


@pytest.fixture
def kids_checkpoint(db):
    return Checkpoint.objects.create(name='Salinha Kids', category=CheckpointCategory.KIDS)


@pytest.fixture
def general_checkpoint(db):
    return Checkpoint.objects.create(name='Recepção / Entrada', category=CheckpointCategory.GENERAL)
