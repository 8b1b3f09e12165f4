"""Sales typed in at the store counter and paid on the spot."""

import logging
from decimal import Decimal

from django.db import transaction

from ..exceptions import InvalidOrderError
from ..models import Product, Sale, SaleItem, SaleStatus

logger = logging.getLogger(__name__)


@transaction.atomic
def record_manual_sale(*, checkpoint, payment_method, buyer_type, buyer_gender, items):
    """
    Record a counter sale as PAID.

    The counter sends the prices it charged, so the total is the sum of
    ``price * quantity`` as given.

    Args:
        checkpoint: Checkpoint where the sale happened
        payment_method: Free text (CASH, CARD, PIX...)
        buyer_type: MEMBER or VISITOR
        buyer_gender: M or F
        items: List of dicts with ``product_id``, ``quantity`` and ``price``

    Raises:
        InvalidOrderError: If an item refers to an unknown product
    """
    product_ids = {item['product_id'] for item in items}
    products = Product.objects.in_bulk(list(product_ids))
    missing = product_ids - set(products)
    if missing:
        raise InvalidOrderError("Unknown products: " + ', '.join(sorted(str(m) for m in missing)))

    total = sum((Decimal(item['price']) * item['quantity'] for item in items), Decimal('0.00'))

    sale = Sale.objects.create(
        checkpoint=checkpoint,
        payment_method=payment_method,
        total=total,
        status=SaleStatus.PAID,
        buyer_type=buyer_type,
        buyer_gender=buyer_gender,
    )
    sale.paid_at = sale.created_at
    sale.save(update_fields=['paid_at'])

    SaleItem.objects.bulk_create([
        SaleItem(
            sale=sale,
            product=products[item['product_id']],
            quantity=item['quantity'],
            price=item['price'],
        )
        for item in items
    ])

    logger.info("Counter sale %s at %s: %s", sale.order_code, checkpoint, total)
    return sale
