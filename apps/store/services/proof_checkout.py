"""
Checkout with proof of payment.

Buyers pay by bank transfer and upload the receipt with the order. Staff
review the receipts and approve (PAID) or reject (deleted) each order.
"""

import logging

from django.db import transaction

from apps.people.models import Gender
from apps.people.services import upsert_buyer
from ..exceptions import InvalidOrderError, InvalidSaleTransitionError, SaleNotFoundError
from ..models import PaymentMethod, Sale, SaleItem, SaleStatus
from .cart import price_cart

logger = logging.getLogger(__name__)


def checkout_email(email, phone):
    """Buyers without e-mail are keyed on their phone."""
    return email or f"temp_{phone}@checkout.com"


@transaction.atomic
def create_proof_order(*, name, phone, items, email=None, age=None, church=None, proof=None):
    """
    Register the buyer and a PENDING transfer order.

    Raises:
        InvalidOrderError: Missing buyer data or empty cart
    """
    if not name or not phone or not items:
        raise InvalidOrderError("Name, phone and items are required")

    lines, total = price_cart(items)

    person = upsert_buyer(
        email=checkout_email(email, phone),
        name=name,
        phone=phone,
        age=age,
        church=church,
    )

    sale = Sale.objects.create(
        person=person,
        payment_method=PaymentMethod.TRANSFER,
        total=total,
        status=SaleStatus.PENDING,
        buyer_name=person.name,
        buyer_type=person.type,
        buyer_gender=person.gender or Gender.MALE,
        proof=proof,
    )
    SaleItem.objects.bulk_create([
        SaleItem(sale=sale, product=line['product'], quantity=line['quantity'], price=line['price'])
        for line in lines
    ])

    logger.info("Transfer order %s created for %s", sale.order_code, person.id)
    return sale


def pending_proofs():
    """PENDING orders with a receipt to review, newest first."""
    return (
        Sale.objects
        .filter(status=SaleStatus.PENDING)
        .exclude(proof='')
        .exclude(proof__isnull=True)
        .prefetch_related('items__product')
        .order_by('-created_at')
    )


def _pending_by_code(code):
    try:
        sale = Sale.objects.select_for_update().get(order_code=str(code).strip().upper())
    except Sale.DoesNotExist:
        raise SaleNotFoundError("Order not found")

    if sale.status != SaleStatus.PENDING:
        raise InvalidSaleTransitionError(f"Order is already {sale.status}")
    return sale


@transaction.atomic
def approve_proof_order(code):
    """Accept the receipt: the order becomes PAID."""
    sale = _pending_by_code(code)
    sale.mark_paid()
    logger.info("Receipt of order %s approved", sale.order_code)
    return sale


@transaction.atomic
def reject_proof_order(code):
    """Refuse the receipt: the order and its items are removed."""
    sale = _pending_by_code(code)
    order_code = sale.order_code
    if sale.proof:
        sale.proof.delete(save=False)
    sale.delete()
    logger.info("Receipt of order %s rejected", order_code)
