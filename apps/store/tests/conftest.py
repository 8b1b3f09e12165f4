import json
from decimal import Decimal
from unittest.mock import patch

import httpx
import pytest
from rest_framework.test import APIClient

from apps.accounts.services import issue_tokens
from apps.people.models import Person, PersonType, Role
from apps.store.gateway import AbacatePayClient
from apps.store.models import Product, Sale, SaleItem, SaleStatus, PaymentMethod

VALID_CPF = '529.982.247-25'


class FakeAbacatePay:
    """
    In-memory AbacatePay: canned answers per (method, path), requests recorded.

    Unknown routes answer 404 with an ``error`` payload, like the real API.
    """

    base_url = 'https://abacatepay.test/v1'

    def __init__(self):
        self.routes = {}
        self.requests = []

    def answer(self, method, path, payload=None, status_code=200):
        self.routes[(method, f'/v1{path}')] = (status_code, payload)

    def fail(self, method, path, exc=None):
        self.routes[(method, f'/v1{path}')] = exc or httpx.ConnectError('connection refused')

    def handler(self, request):
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={'data': None, 'error': 'Not found'})
        if isinstance(route, Exception):
            raise route
        status_code, payload = route
        return httpx.Response(status_code, json=payload)

    def client(self):
        return AbacatePayClient(
            api_key='test-key',
            base_url=self.base_url,
            transport=httpx.MockTransport(self.handler),
        )

    def sent_json(self, path):
        """Body of the last request sent to ``path``."""
        for request in reversed(self.requests):
            if request.url.path == f'/v1{path}':
                return json.loads(request.content)
        return None


@pytest.fixture
def fake_gateway():
    """Route every gateway client built by the services to a FakeAbacatePay."""
    fake = FakeAbacatePay()
    with patch('apps.store.gateway.get_gateway_client', side_effect=fake.client):
        yield fake


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
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path
    return tmp_path


@pytest.fixture
def bible(db):
    return Product.objects.create(name='Bíblia', price=Decimal('89.90'), category='LOJA')


@pytest.fixture
def coffee(db):
    return Product.objects.create(name='Café', price=Decimal('5.50'), category='CANTINA')


@pytest.fixture
def buyer(db):
    return Person.objects.create(
        name='Maria Souza',
        email='maria@example.com',
        phone='31999990000',
        type=PersonType.MEMBER,
    )


@pytest.fixture
def paid_sale(buyer, bible):
    sale = Sale.objects.create(
        person=buyer,
        buyer_name=buyer.name,
        payment_method=PaymentMethod.PIX,
        external_id='bill_paid',
        total=bible.price,
        status=SaleStatus.PAID,
    )
    SaleItem.objects.create(sale=sale, product=bible, quantity=1, price=bible.price)
    return sale


@pytest.fixture
def pending_pix_sale(buyer, coffee):
    sale = Sale.objects.create(
        person=buyer,
        buyer_name=buyer.name,
        payment_method=PaymentMethod.PIX,
        external_id='bill_123',
        total=Decimal('11.00'),
        status=SaleStatus.PENDING,
    )
    SaleItem.objects.create(sale=sale, product=coffee, quantity=2, price=coffee.price)
    return sale
