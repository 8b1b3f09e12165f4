"""Domain-specific exceptions for meetings services."""


class MeetingsServiceError(Exception):
    """Base exception for meetings services."""
    pass


class MeetingNotFoundError(MeetingsServiceError):
    """Raised when meeting does not exist."""
    pass
