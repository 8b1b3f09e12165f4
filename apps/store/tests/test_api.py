import json
import uuid
from decimal import Decimal

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse
from rest_framework import status

from apps.people.models import Person
from apps.store.models import Product, Sale, SaleItem, SaleStatus, PaymentMethod


# =============================================================================
# Product Catalogue Tests
# =============================================================================

@pytest.mark.django_db
class TestProductList:
    """Tests for GET /api/products/"""

    def test_list_public(self, api_client, bible, coffee):
        url = reverse('products:product-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [p['name'] for p in response.data] == ['Bíblia', 'Café']
        assert response.data[0]['price'] == Decimal('89.90')

    def test_filter_by_category(self, api_client, bible, coffee):
        url = reverse('products:product-list')
        response = api_client.get(url, {'category': 'CANTINA'})

        assert [p['name'] for p in response.data] == ['Café']

    @pytest.mark.parametrize('category', ['Todos', 'STORE', ''])
    def test_all_categories(self, api_client, bible, coffee, category):
        url = reverse('products:product-list')
        response = api_client.get(url, {'category': category})

        assert len(response.data) == 2


@pytest.mark.django_db
class TestProductManagement:
    """Tests for POST /api/products/ and DELETE /api/products/{id}/"""

    def test_create_product(self, staff_client):
        url = reverse('products:product-list')
        data = {'name': 'Camiseta Ekklesia', 'price': '45.00', 'description': 'Algodão'}
        response = staff_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['category'] == 'LOJA'
        assert Product.objects.get().price == Decimal('45.00')

    def test_create_requires_staff(self, api_client, db):
        url = reverse('products:product-list')
        response = api_client.post(url, {'name': 'Boné', 'price': '30.00'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_create_negative_price(self, staff_client):
        url = reverse('products:product-list')
        response = staff_client.post(url, {'name': 'Boné', 'price': '-1.00'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_keeps_sale_history(self, staff_client, paid_sale, bible):
        url = reverse('products:product-detail', kwargs={'pk': bible.id})
        response = staff_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True}
        item = SaleItem.objects.get(sale=paid_sale)
        assert item.product is None
        assert item.price == Decimal('89.90')

    def test_delete_unknown(self, staff_client):
        url = reverse('products:product-detail', kwargs={'pk': uuid.uuid4()})
        response = staff_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Pickup Tests
# =============================================================================

@pytest.mark.django_db
class TestDeliver:
    """Tests for PATCH /api/orders/{id}/deliver/"""

    def test_deliver_paid_sale(self, staff_client, paid_sale):
        url = reverse('orders:deliver', kwargs={'sale_id': paid_sale.id})
        response = staff_client.patch(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['sale']['status'] == SaleStatus.DELIVERED
        paid_sale.refresh_from_db()
        assert paid_sale.delivered_at is not None

    def test_pending_sale_cannot_be_delivered(self, staff_client, pending_pix_sale):
        url = reverse('orders:deliver', kwargs={'sale_id': pending_pix_sale.id})
        response = staff_client.patch(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        pending_pix_sale.refresh_from_db()
        assert pending_pix_sale.status == SaleStatus.PENDING

    def test_deliver_twice(self, staff_client, paid_sale):
        url = reverse('orders:deliver', kwargs={'sale_id': paid_sale.id})
        staff_client.patch(url)
        response = staff_client.patch(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_deliver_unknown(self, staff_client):
        url = reverse('orders:deliver', kwargs={'sale_id': uuid.uuid4()})
        response = staff_client.patch(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestPendingAndVoucher:

    def test_pending_lists_paid_oldest_first(self, staff_client, paid_sale, pending_pix_sale, buyer):
        newer = Sale.objects.create(person=buyer, total=Decimal('5.50'), status=SaleStatus.PAID)

        url = reverse('orders:pending')
        response = staff_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [s['id'] for s in response.data] == [str(paid_sale.id), str(newer.id)]
        assert response.data[0]['items'][0]['product']['name'] == 'Bíblia'
        assert response.data[0]['person']['name'] == 'Maria Souza'

    def test_voucher_lookup_case_insensitive(self, api_client, paid_sale):
        url = reverse('orders:by-code', kwargs={'code': paid_sale.order_code.lower()})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(paid_sale.id)

    def test_voucher_unknown(self, api_client, db):
        url = reverse('orders:by-code', kwargs={'code': 'ZZZZZZ'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Checkout With Proof of Payment Tests
# =============================================================================

def _receipt():
    return SimpleUploadedFile('comprovante.PDF', b'%PDF-1.4 receipt', content_type='application/pdf')


@pytest.mark.django_db
class TestProofCheckout:
    """Tests for the transfer checkout and the receipt review."""

    def _checkout(self, client, *products, **extra):
        url = reverse('orders:checkout')
        data = {
            'name': 'Paula Reis',
            'phone': '31977776666',
            'items': json.dumps([{'product_id': str(p.id), 'quantity': 1} for p in products]),
            'proof': _receipt(),
            **extra,
        }
        return client.post(url, data, format='multipart')

    def test_checkout_creates_pending_transfer(self, api_client, media_root, bible):
        response = self._checkout(api_client, bible)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        sale = Sale.objects.get(order_code=response.data['order_code'])
        assert sale.status == SaleStatus.PENDING
        assert sale.payment_method == PaymentMethod.TRANSFER
        assert sale.total == Decimal('89.90')
        assert sale.proof.name.startswith('proofs/proof-')
        assert sale.proof.name.endswith('.pdf')

    def test_buyer_without_email_keyed_on_phone(self, api_client, media_root, bible):
        response = self._checkout(api_client, bible)

        person = Person.objects.get(id=response.data['person_id'])
        assert person.email == 'temp_31977776666@checkout.com'

    def test_checkout_with_email(self, api_client, media_root, bible, buyer):
        response = self._checkout(api_client, bible, email='maria@example.com')

        assert response.data['person_id'] == buyer.id

    def test_empty_cart(self, api_client, media_root, db):
        response = self._checkout(api_client)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Empty cart'

    def test_proofs_listed_for_review(self, api_client, staff_client, media_root, bible, pending_pix_sale):
        code = self._checkout(api_client, bible).data['order_code']

        url = reverse('orders:proofs')
        response = staff_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [s['order_code'] for s in response.data] == [code]
        assert response.data[0]['proof_url'].startswith('/uploads/proofs/')

    def test_approve(self, api_client, staff_client, media_root, bible):
        code = self._checkout(api_client, bible).data['order_code']

        url = reverse('orders:approve', kwargs={'code': code})
        response = staff_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        sale = Sale.objects.get(order_code=code)
        assert sale.status == SaleStatus.PAID
        assert sale.paid_at is not None

        again = staff_client.post(url)
        assert again.status_code == status.HTTP_400_BAD_REQUEST

    def test_reject_removes_order_and_file(self, api_client, staff_client, media_root, bible):
        code = self._checkout(api_client, bible).data['order_code']
        proof_path = media_root / Sale.objects.get(order_code=code).proof.name
        assert proof_path.exists()

        url = reverse('orders:reject', kwargs={'code': code})
        response = staff_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert not Sale.objects.filter(order_code=code).exists()
        assert SaleItem.objects.count() == 0
        assert not proof_path.exists()

    def test_review_requires_staff(self, api_client, db):
        url = reverse('orders:approve', kwargs={'code': 'ABC123'})
        response = api_client.post(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_approve_unknown(self, staff_client):
        url = reverse('orders:approve', kwargs={'code': 'ABC123'})
        response = staff_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
