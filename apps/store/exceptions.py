"""
Domain exceptions for the store app.

Services raise these; views translate them into ``{'error': ...}``
responses with the matching status code.
"""


class StoreServiceError(Exception):
    """Base exception for store service errors."""
    pass


class ProductNotFoundError(StoreServiceError):
    """Raised when a product does not exist."""
    pass


class SaleNotFoundError(StoreServiceError):
    """Raised when a sale/order does not exist."""
    pass


class InvalidOrderError(StoreServiceError):
    """Raised when order data is missing or invalid (buyer, CPF, cart)."""
    pass


class InvalidSaleTransitionError(StoreServiceError):
    """Raised when a sale cannot move to the requested status."""
    pass


class GatewayError(StoreServiceError):
    """Raised when the payment gateway call fails."""
    pass


class PaymentCustomerError(StoreServiceError):
    """Raised when no gateway customer could be created or found."""
    pass


class WebhookAuthenticationError(StoreServiceError):
    """Raised when a webhook arrives with the wrong secret."""
    pass
