"""Pickup of paid orders at the store counter."""

import logging

from django.db import transaction

from ..exceptions import InvalidSaleTransitionError, SaleNotFoundError
from ..models import Sale, SaleStatus

logger = logging.getLogger(__name__)


def _with_details(queryset):
    return queryset.select_related('person', 'checkpoint').prefetch_related('items__product')


@transaction.atomic
def deliver_sale(sale_id):
    """
    Hand a paid order over to the buyer.

    Raises:
        SaleNotFoundError: If the sale doesn't exist
        InvalidSaleTransitionError: If the sale is not PAID
    """
    try:
        sale = Sale.objects.select_for_update().get(id=sale_id)
    except Sale.DoesNotExist:
        raise SaleNotFoundError("Order not found")

    if sale.status != SaleStatus.PAID:
        raise InvalidSaleTransitionError(
            f"Only paid orders can be delivered (order is {sale.status})"
        )

    sale.mark_delivered()
    logger.info("Order %s delivered", sale.order_code)
    return sale


def pending_pickups():
    """Paid orders waiting at the counter, first come first served."""
    return _with_details(Sale.objects.filter(status=SaleStatus.PAID)).order_by('created_at')


def get_sale_by_code(code):
    """Voucher lookup. Codes are case-insensitive."""
    try:
        return _with_details(Sale.objects).get(order_code=str(code).strip().upper())
    except Sale.DoesNotExist:
        raise SaleNotFoundError("Order not found")


def open_orders_for_person(person):
    """Orders of a person not picked up yet."""
    return _with_details(
        Sale.objects.filter(person=person).exclude(status=SaleStatus.DELIVERED)
    ).order_by('-created_at')
