"""Domain-specific exceptions for checkpoint services."""


class CheckpointServiceError(Exception):
    """Base exception for checkpoint services."""
    pass


class CheckpointNotFoundError(CheckpointServiceError):
    """Raised when checkpoint does not exist."""
    pass
