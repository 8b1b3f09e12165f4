"""Cart pricing shared by the online checkouts."""

import json
import uuid
from decimal import Decimal

from ..exceptions import InvalidOrderError
from ..models import Product

# Per cart line
MAX_ITEM_QUANTITY = 1000


def parse_cart(items):
    """
    Accept the cart as a list or as a JSON string (multipart forms).

    Raises:
        InvalidOrderError: If the cart is empty or unreadable
    """
    if isinstance(items, (str, bytes)):
        try:
            items = json.loads(items)
        except ValueError:
            raise InvalidOrderError("Invalid cart")

    if not isinstance(items, list) or not items:
        raise InvalidOrderError("Empty cart")
    return items


def _as_uuid(value):
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


def _quantity(value):
    try:
        quantity = max(1, int(value))
    except (TypeError, ValueError, OverflowError):
        return 1
    if quantity > MAX_ITEM_QUANTITY:
        raise InvalidOrderError("Invalid quantity")
    return quantity


def price_cart(items):
    """
    Price cart lines with the catalogue prices.

    Client prices are ignored. Unknown products are skipped and unreadable
    quantities count as 1.

    Returns:
        Tuple of (lines, total) where each line is a dict with
        ``product``, ``quantity`` and ``price``

    Raises:
        InvalidOrderError: If no line refers to a known product or a
            quantity is above MAX_ITEM_QUANTITY
    """
    items = parse_cart(items)

    ids = {_as_uuid(item.get('product_id')) for item in items if isinstance(item, dict)}
    ids.discard(None)
    by_id = Product.objects.in_bulk(list(ids))

    lines = []
    total = Decimal('0.00')
    for item in items:
        if not isinstance(item, dict):
            continue
        product = by_id.get(_as_uuid(item.get('product_id')))
        if product is None:
            continue

        quantity = _quantity(item.get('quantity'))
        total += product.price * quantity
        lines.append({'product': product, 'quantity': quantity, 'price': product.price})

    if not lines:
        raise InvalidOrderError("Invalid products")
    return lines, total
