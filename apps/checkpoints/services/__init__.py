"""Services for checkpoint operations."""

from .exceptions import (
    CheckpointServiceError,
    CheckpointNotFoundError,
)
from .attendance import (
    list_checkpoints,
    get_checkpoint,
    record_count,
    DOUBLE_CLICK_WINDOW,
)
from .scanning import (
    track_scan,
    SCAN_SUCCESS,
    SCAN_IGNORED,
    SCAN_REENTRY,
    RESCAN_WINDOW,
)

__all__ = [
    # Exceptions
    'CheckpointServiceError',
    'CheckpointNotFoundError',
    # Attendance
    'list_checkpoints',
    'get_checkpoint',
    'record_count',
    'DOUBLE_CLICK_WINDOW',
    # Scanning
    'track_scan',
    'SCAN_SUCCESS',
    'SCAN_IGNORED',
    'SCAN_REENTRY',
    'RESCAN_WINDOW',
]
