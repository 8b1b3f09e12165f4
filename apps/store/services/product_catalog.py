"""Product catalogue operations."""

from django.db import transaction

from ..exceptions import ProductNotFoundError
from ..models import Product

# Front-end tabs that mean "everything"
ALL_CATEGORIES = {'', 'Todos', 'STORE'}


def list_products(category=None):
    products = Product.objects.order_by('name')
    if category and category not in ALL_CATEGORIES:
        products = products.filter(category=category)
    return products


def create_product(*, name, price, description='', category='', image_url=None):
    return Product.objects.create(
        name=name,
        price=price,
        description=description or '',
        category=category or 'LOJA',
        image_url=image_url or None,
    )


@transaction.atomic
def delete_product(product_id):
    """
    Remove a product. Past sale items keep their price and lose the link.

    Raises:
        ProductNotFoundError: If the product doesn't exist
    """
    deleted, _ = Product.objects.filter(id=product_id).delete()
    if not deleted:
        raise ProductNotFoundError(f"Product {product_id} not found")
