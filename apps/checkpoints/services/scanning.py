"""QR code scans of registered people at the checkpoints."""

import logging
from datetime import timedelta

from django.db import transaction
from django.utils import timezone

from apps.people.services import get_person, start_of_today
from ..models import Movement
from .attendance import get_checkpoint

logger = logging.getLogger(__name__)

SCAN_SUCCESS = 'SUCCESS'
SCAN_IGNORED = 'IGNORED'
SCAN_REENTRY = 'REENTRY'

# The scanner fires repeatedly while the badge is in front of the camera
RESCAN_WINDOW = timedelta(seconds=60)


@transaction.atomic
def track_scan(*, person_id, checkpoint_id):
    """
    Register a person entering a checkpoint.

    Returns:
        Tuple of (status, movement). ``movement`` is None unless the status
        is ``SUCCESS``.
        - IGNORED: the person scanned here less than a minute ago
        - REENTRY: the person already entered today and the checkpoint
          only counts one entry per day
        - SUCCESS: a new movement was recorded

    Raises:
        CheckpointNotFoundError: If the checkpoint doesn't exist
        PersonNotFoundError: If the person doesn't exist
    """
    checkpoint = get_checkpoint(checkpoint_id)
    person = get_person(person_id)

    latest_today = (
        Movement.objects
        .filter(person=person, checkpoint=checkpoint, timestamp__gte=start_of_today())
        .order_by('-timestamp')
        .first()
    )

    if latest_today is not None:
        if timezone.now() - latest_today.timestamp < RESCAN_WINDOW:
            return SCAN_IGNORED, None
        if not checkpoint.allows_reentry:
            logger.info("%s already entered %s today", person.id, checkpoint)
            return SCAN_REENTRY, None

    movement = Movement.objects.create(person=person, checkpoint=checkpoint)
    return SCAN_SUCCESS, movement
