from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from apps.accounts.services import issue_tokens
from apps.checkpoints.models import Checkpoint, CheckpointCategory
from apps.people.models import Person, PersonType, Role
from apps.store.models import Product


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
def entrance(db):
    """Main entrance: one entry per person per day."""
    return Checkpoint.objects.create(name='Recepção / Entrada', category=CheckpointCategory.GENERAL)


@pytest.fixture
def prayer_room(db):
    """Service room people may visit several times a day."""
    return Checkpoint.objects.create(name='Tenda de Oração', category=CheckpointCategory.PRAYER)


@pytest.fixture
def store_checkpoint(db):
    return Checkpoint.objects.create(name='Livraria', category=CheckpointCategory.STORE)


@pytest.fixture
def visitor(db):
    return Person.objects.create(name='Joao Visitante', type=PersonType.VISITOR)


@pytest.fixture
def product(db):
    return Product.objects.create(name='Bíblia', price=Decimal('89.90'), category='LOJA')
