"""Services for store business logic."""

from .cart import parse_cart, price_cart
from .product_catalog import (
    list_products,
    create_product,
    delete_product,
    ALL_CATEGORIES,
)
from .manual_sales import record_manual_sale
from .pix_orders import (
    create_pix_order,
    confirm_pix_payment,
    check_payment_status,
    handle_gateway_webhook,
    verify_webhook_secret,
    to_cents,
)
from .order_fulfillment import (
    deliver_sale,
    pending_pickups,
    get_sale_by_code,
    open_orders_for_person,
)
from .proof_checkout import (
    create_proof_order,
    pending_proofs,
    approve_proof_order,
    reject_proof_order,
    checkout_email,
)

__all__ = [
    # Cart
    'parse_cart',
    'price_cart',
    # Product Catalog
    'list_products',
    'create_product',
    'delete_product',
    'ALL_CATEGORIES',
    # Manual Sales
    'record_manual_sale',
    # PIX Orders
    'create_pix_order',
    'confirm_pix_payment',
    'check_payment_status',
    'handle_gateway_webhook',
    'verify_webhook_secret',
    'to_cents',
    # Order Fulfillment
    'deliver_sale',
    'pending_pickups',
    'get_sale_by_code',
    'open_orders_for_person',
    # Proof Checkout
    'create_proof_order',
    'pending_proofs',
    'approve_proof_order',
    'reject_proof_order',
    'checkout_email',
]
