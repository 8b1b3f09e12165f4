"""
PIX order service.

Online orders paid with PIX through AbacatePay:

1. ``create_pix_order`` prices the cart, upserts the buyer, makes sure the
   buyer exists as a gateway customer, creates a one-time billing and saves
   a PENDING sale holding the billing id.
2. The buyer's page polls ``check_payment_status`` while the gateway calls
   the webhook (``handle_gateway_webhook``). Whichever arrives first moves
   the sale to PAID.
"""

import hmac
import logging
from decimal import Decimal, ROUND_HALF_UP

from django.conf import settings
from django.db import transaction

from apps.people.models import Gender
from apps.people.services import only_digits, upsert_buyer
from .. import gateway
from ..exceptions import (
    GatewayError,
    InvalidOrderError,
    PaymentCustomerError,
    WebhookAuthenticationError,
)
from ..models import PaymentMethod, Sale, SaleItem, SaleStatus
from ..qr import generate_qr_data_uri
from ..validators import is_valid_cpf, normalize_cpf
from .cart import price_cart

logger = logging.getLogger(__name__)

PAID_GATEWAY_STATUSES = {'PAID', 'COMPLETED'}
PAID_WEBHOOK_EVENT = 'billing.paid'


def to_cents(amount):
    return int((Decimal(amount) * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def create_pix_order(*, name, email, phone, cpf, items, age=None, church=None, gender=None):
    """
    Create a PIX order and its billing at the gateway.

    Returns:
        Tuple of (sale, pix_data) where pix_data holds ``payment_id``,
        ``copy_paste`` and ``qr_code`` (PNG data URI)

    Raises:
        InvalidOrderError: Missing buyer data, invalid CPF or empty cart
        PaymentCustomerError: If no gateway customer could be obtained
        GatewayError: If the billing could not be created
    """
    if not all([name, email, phone, cpf]):
        raise InvalidOrderError("Missing required buyer data")

    clean_cpf = normalize_cpf(cpf)
    if not is_valid_cpf(clean_cpf):
        raise InvalidOrderError("Invalid CPF")

    clean_phone = only_digits(phone)
    lines, total = price_cart(items)

    person = upsert_buyer(
        email=email,
        name=name,
        phone=clean_phone,
        age=age,
        church=church,
        gender=gender,
        default_gender=Gender.MALE,
    )

    with gateway.get_gateway_client() as client:
        customer_id = client.find_or_create_customer(
            name=name,
            email=email,
            cellphone=clean_phone,
            tax_id=clean_cpf,
        )
        if not customer_id:
            raise PaymentCustomerError("Could not create payment customer")

        billing = client.create_billing(
            customer_id=customer_id,
            products=[
                {
                    'externalId': str(line['product'].id),
                    'name': line['product'].name,
                    'quantity': line['quantity'],
                    'price': to_cents(line['price']),
                }
                for line in lines
            ],
            return_url=settings.CHECKOUT_RETURN_URL,
        )

    if not billing or not billing.get('id'):
        raise GatewayError("Could not generate PIX")

    with transaction.atomic():
        sale = Sale.objects.create(
            external_id=billing['id'],
            person=person,
            payment_method=PaymentMethod.PIX,
            total=total,
            status=SaleStatus.PENDING,
            buyer_name=name,
            buyer_type=person.type,
            buyer_gender=person.gender or Gender.MALE,
        )
        SaleItem.objects.bulk_create([
            SaleItem(sale=sale, product=line['product'], quantity=line['quantity'], price=line['price'])
            for line in lines
        ])

    logger.info("PIX order %s created (billing %s, total %s)", sale.order_code, sale.external_id, total)

    copy_paste = (billing.get('pix') or {}).get('code') or billing.get('url')
    pix_data = {
        'payment_id': billing['id'],
        'copy_paste': copy_paste,
        'qr_code': generate_qr_data_uri(copy_paste) if copy_paste else None,
    }
    return sale, pix_data


@transaction.atomic
def confirm_pix_payment(external_id):
    """
    Move the PENDING sale of a billing to PAID.

    Returns the sale, or None when no sale holds this billing. Sales already
    paid or delivered are returned untouched.
    """
    sale = Sale.objects.select_for_update().filter(external_id=external_id).first()
    if sale is None:
        return None

    if sale.status == SaleStatus.PENDING:
        sale.mark_paid()
        logger.info("Sale %s paid (billing %s)", sale.order_code, external_id)
    return sale


def check_payment_status(payment_id):
    """
    Ask the gateway whether a billing was paid.

    Gateway failures never reach the buyer's page: it just keeps waiting.

    Returns:
        ``{'status': 'PAID', 'order_code': ...}`` or ``{'status': 'PENDING'}``
    """
    try:
        with gateway.get_gateway_client() as client:
            billing = client.get_billing(payment_id)
    except GatewayError as e:
        logger.warning("Status check of billing %s failed: %s", payment_id, e)
        return {'status': SaleStatus.PENDING}

    if not billing:
        logger.warning("Billing %s not found at the gateway", payment_id)
        return {'status': SaleStatus.PENDING}

    if str(billing.get('status', '')).upper() in PAID_GATEWAY_STATUSES:
        sale = confirm_pix_payment(payment_id)
        if sale is not None:
            return {'status': SaleStatus.PAID, 'order_code': sale.order_code}

    return {'status': SaleStatus.PENDING}


def verify_webhook_secret(received):
    """
    Raises:
        WebhookAuthenticationError: If a secret is configured and differs
    """
    expected = settings.ABACATEPAY_WEBHOOK_SECRET
    if expected and not hmac.compare_digest(str(received or ''), expected):
        raise WebhookAuthenticationError("Invalid webhook secret")


def handle_gateway_webhook(payload, secret=None):
    """
    Process a gateway notification.

    Only paid billings matter; everything else is acknowledged and ignored.

    Returns:
        The sale that was confirmed, or None
    """
    verify_webhook_secret(secret)

    if not isinstance(payload, dict):
        return None

    event = payload.get('event')
    data = payload.get('data')
    if not isinstance(data, dict):
        logger.warning("Gateway webhook %s without a data object, ignored", event)
        return None
    logger.info("Gateway webhook received: %s %s %s", event, data.get('id'), data.get('status'))

    if event != PAID_WEBHOOK_EVENT and data.get('status') != SaleStatus.PAID:
        return None

    # billing.paid nests the billing under data.billing
    billing = data.get('billing')
    if isinstance(billing, dict) and billing.get('id'):
        billing_id = billing['id']
    else:
        billing_id = data.get('id')
    if not billing_id or not isinstance(billing_id, str):
        return None

    return confirm_pix_payment(billing_id)
