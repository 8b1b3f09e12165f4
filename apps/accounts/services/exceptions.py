"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class MissingEmailError(AccountsServiceError):
    """Raised when login is attempted without an e-mail."""
    pass


class StaffAccessDeniedError(AccountsServiceError):
    """Raised when the e-mail does not belong to a staff member."""
    pass
