"""
AbacatePay API Client
=====================

HTTP client for the AbacatePay payment gateway (customers and PIX billings).

Every response of the API is wrapped as ``{"data": ..., "error": ...}``;
the helpers here unwrap ``data`` and raise ``GatewayError`` on transport
failures, non-2xx answers and ``error`` payloads.

Example::

    from apps.store.gateway import get_gateway_client

    with get_gateway_client() as gateway:
        billing = gateway.create_billing(
            customer_id='cust_123',
            products=[{'externalId': 'p1', 'name': 'Camiseta', 'quantity': 1, 'price': 5000}],
        )
        billing['id'], billing['pix']['code']
"""

import logging

import httpx
from django.conf import settings

from .exceptions import GatewayError

logger = logging.getLogger(__name__)


class AbacatePayClient:
    """Synchronous AbacatePay client with bearer authentication."""

    def __init__(self, api_key, base_url, timeout=15.0, transport=None):
        self.client = httpx.Client(
            base_url=base_url,
            headers={
                'Authorization': f'Bearer {api_key}',
                'Content-Type': 'application/json',
            },
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self.client.close()

    def _request(self, method, endpoint, **kwargs):
        try:
            response = self.client.request(method, endpoint, **kwargs)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "AbacatePay %s %s answered %s", method, endpoint, e.response.status_code
            )
            raise GatewayError(f"Gateway answered {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error("AbacatePay %s %s failed: %s", method, endpoint, e)
            raise GatewayError("Payment gateway unavailable") from e

        if isinstance(payload, dict):
            if payload.get('error'):
                raise GatewayError(str(payload['error']))
            if 'data' in payload:
                return payload['data']
        return payload

    # Customers

    def create_customer(self, *, name, email, cellphone, tax_id):
        return self._request('POST', '/customer/create', json={
            'name': name,
            'email': email,
            'cellphone': cellphone,
            'taxId': tax_id,
        })

    def list_customers(self):
        return self._request('GET', '/customer/list') or []

    def find_or_create_customer(self, *, name, email, cellphone, tax_id):
        """
        Return the gateway customer id for the buyer.

        Creating fails when the customer already exists, in which case the
        customer list is searched by e-mail or CPF. Returns None when no
        customer could be found either.
        """
        try:
            customer = self.create_customer(
                name=name, email=email, cellphone=cellphone, tax_id=tax_id
            )
            if customer and customer.get('id'):
                return customer['id']
        except GatewayError as e:
            logger.info("Customer creation failed (%s), searching the customer list", e)

        for customer in self.list_customers():
            metadata = customer.get('metadata') or {}
            emails = {customer.get('email'), metadata.get('email')}
            tax_ids = {customer.get('taxId'), metadata.get('taxId')}
            if email in emails or tax_id in tax_ids:
                return customer.get('id')
        return None

    # Billings

    def create_billing(self, *, customer_id, products, return_url=None, completion_url=None):
        """Create a one-time PIX billing. Product prices are in cents."""
        return self._request('POST', '/billing/create', json={
            'frequency': 'ONE_TIME',
            'methods': ['PIX'],
            'customerId': customer_id,
            'products': products,
            'returnUrl': return_url,
            'completionUrl': completion_url or return_url,
        })

    def get_billing(self, billing_id):
        """Fetch a billing by id, or None when the gateway doesn't list it."""
        found = self._request('GET', '/billing/list', params={'id': billing_id})
        if isinstance(found, list):
            return next((b for b in found if b.get('id') == billing_id), None)
        return found or None


def get_gateway_client():
    """Build a client from the ABACATEPAY_* settings."""
    return AbacatePayClient(
        api_key=settings.ABACATEPAY_API_KEY,
        base_url=settings.ABACATEPAY_BASE_URL,
        timeout=settings.ABACATEPAY_TIMEOUT,
    )
