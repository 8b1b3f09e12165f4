"""
AbacatePay client tests.

Requests go through httpx.MockTransport, so the real client code builds
and parses every call.
"""

import base64

import httpx
import pytest

from apps.store.exceptions import GatewayError
from apps.store.qr import generate_qr_data_uri
from .conftest import FakeAbacatePay


@pytest.fixture
def fake():
    return FakeAbacatePay()


class TestRequestHandling:

    def test_unwraps_data(self, fake):
        fake.answer('POST', '/customer/create', {'data': {'id': 'cust_1'}, 'error': None})

        with fake.client() as client:
            customer = client.create_customer(
                name='Maria', email='maria@example.com', cellphone='31999990000', tax_id='52998224725'
            )

        assert customer == {'id': 'cust_1'}
        sent = fake.sent_json('/customer/create')
        assert sent['taxId'] == '52998224725'
        assert fake.requests[0].headers['Authorization'] == 'Bearer test-key'

    def test_error_payload_raises(self, fake):
        fake.answer('GET', '/customer/list', {'data': None, 'error': 'Invalid API key'})

        with fake.client() as client, pytest.raises(GatewayError, match='Invalid API key'):
            client.list_customers()

    def test_http_error_raises(self, fake):
        fake.answer('POST', '/billing/create', {'error': 'boom'}, status_code=500)

        with fake.client() as client, pytest.raises(GatewayError, match='500'):
            client.create_billing(customer_id='cust_1', products=[])

    def test_transport_error_raises(self, fake):
        fake.fail('GET', '/billing/list', httpx.ReadTimeout('timed out'))

        with fake.client() as client, pytest.raises(GatewayError, match='unavailable'):
            client.get_billing('bill_1')


class TestCustomers:

    def test_created_customer(self, fake):
        fake.answer('POST', '/customer/create', {'data': {'id': 'cust_new'}})

        with fake.client() as client:
            customer_id = client.find_or_create_customer(
                name='Maria', email='maria@example.com', cellphone='31999990000', tax_id='52998224725'
            )

        assert customer_id == 'cust_new'

    def test_existing_customer_found_by_metadata(self, fake):
        """Creation fails for known customers; the list is searched instead."""
        fake.answer('POST', '/customer/create', {'error': 'Customer already exists'}, status_code=400)
        fake.answer('GET', '/customer/list', {'data': [
            {'id': 'cust_other', 'metadata': {'email': 'other@example.com', 'taxId': '11144477735'}},
            {'id': 'cust_maria', 'metadata': {'email': 'maria@example.com', 'taxId': '52998224725'}},
        ]})

        with fake.client() as client:
            customer_id = client.find_or_create_customer(
                name='Maria', email='maria@example.com', cellphone='31999990000', tax_id='52998224725'
            )

        assert customer_id == 'cust_maria'

    def test_existing_customer_found_by_tax_id(self, fake):
        fake.answer('POST', '/customer/create', {'error': 'Customer already exists'}, status_code=400)
        fake.answer('GET', '/customer/list', {'data': [
            {'id': 'cust_maria', 'email': 'old@example.com', 'taxId': '52998224725'},
        ]})

        with fake.client() as client:
            customer_id = client.find_or_create_customer(
                name='Maria', email='maria@example.com', cellphone='31999990000', tax_id='52998224725'
            )

        assert customer_id == 'cust_maria'

    def test_no_customer(self, fake):
        fake.answer('POST', '/customer/create', {'error': 'Invalid taxId'}, status_code=400)
        fake.answer('GET', '/customer/list', {'data': []})

        with fake.client() as client:
            customer_id = client.find_or_create_customer(
                name='Maria', email='maria@example.com', cellphone='31999990000', tax_id='52998224725'
            )

        assert customer_id is None


class TestBillings:

    def test_create_billing_body(self, fake):
        fake.answer('POST', '/billing/create', {'data': {'id': 'bill_1', 'url': 'https://pay.test/bill_1'}})

        with fake.client() as client:
            billing = client.create_billing(
                customer_id='cust_1',
                products=[{'externalId': 'p1', 'name': 'Café', 'quantity': 2, 'price': 550}],
                return_url='https://event.test/return',
            )

        assert billing['id'] == 'bill_1'
        sent = fake.sent_json('/billing/create')
        assert sent['frequency'] == 'ONE_TIME'
        assert sent['methods'] == ['PIX']
        assert sent['customerId'] == 'cust_1'
        assert sent['completionUrl'] == 'https://event.test/return'

    def test_get_billing_picks_matching_id(self, fake):
        fake.answer('GET', '/billing/list', {'data': [
            {'id': 'bill_0', 'status': 'PENDING'},
            {'id': 'bill_1', 'status': 'PAID'},
        ]})

        with fake.client() as client:
            billing = client.get_billing('bill_1')

        assert billing == {'id': 'bill_1', 'status': 'PAID'}
        assert fake.requests[0].url.params['id'] == 'bill_1'

    def test_get_billing_missing(self, fake):
        fake.answer('GET', '/billing/list', {'data': []})

        with fake.client() as client:
            assert client.get_billing('bill_9') is None


class TestQrCode:

    def test_png_data_uri(self):
        uri = generate_qr_data_uri('00020126580014br.gov.bcb.pix0136abc')

        assert uri.startswith('data:image/png;base64,')
        png = base64.b64decode(uri.split(',', 1)[1])
        assert png[:8] == b'\x89PNG\r\n\x1a\n'
