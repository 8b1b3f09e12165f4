"""Domain-specific exceptions for people services."""


class PeopleServiceError(Exception):
    """Base exception for people services."""
    pass


class PersonNotFoundError(PeopleServiceError):
    """Raised when person does not exist."""
    pass


class DuplicatePersonError(PeopleServiceError):
    """Raised when the e-mail is already registered."""
    pass
