"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    MissingEmailError,
    StaffAccessDeniedError,
)
from .staff_authentication import authenticate_staff, issue_tokens

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'MissingEmailError',
    'StaffAccessDeniedError',
    # Services
    'authenticate_staff',
    'issue_tokens',
]
