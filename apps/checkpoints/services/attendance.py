"""Manual headcounts typed by staff at the checkpoints."""

import logging
from datetime import timedelta

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from ..models import Checkpoint, ManualEntry
from .exceptions import CheckpointNotFoundError

logger = logging.getLogger(__name__)

# Two identical taps closer than this are one double click
DOUBLE_CLICK_WINDOW = timedelta(milliseconds=500)


def list_checkpoints():
    return Checkpoint.objects.order_by('name')


def get_checkpoint(checkpoint_id):
    try:
        return Checkpoint.objects.get(id=checkpoint_id)
    except Checkpoint.DoesNotExist:
        raise CheckpointNotFoundError(f"Checkpoint {checkpoint_id} not found")


@transaction.atomic
def record_count(
    *,
    checkpoint_id,
    type,
    church=None,
    quantity=1,
    age_group=None,
    gender=None,
    marketing_source=None,
    is_salvation=False,
    is_healing=False,
    is_deliverance=False,
):
    """
    Record a manual headcount.

    A tap identical to the latest one for the same checkpoint and type
    (same gender and age group) within ``DOUBLE_CLICK_WINDOW`` is ignored.

    Returns:
        Tuple of (entry, ignored). ``entry`` is None when ignored.

    Raises:
        CheckpointNotFoundError: If the checkpoint doesn't exist
    """
    checkpoint = get_checkpoint(checkpoint_id)

    last_entry = (
        ManualEntry.objects
        .select_for_update()
        .filter(checkpoint=checkpoint, type=type)
        .order_by('-timestamp')
        .first()
    )
    now = timezone.now()
    if (
        last_entry is not None
        and (last_entry.gender or '') == (gender or '')
        and (last_entry.age_group or '') == (age_group or '')
        and now - last_entry.timestamp < DOUBLE_CLICK_WINDOW
    ):
        logger.info("Ignored double click at %s (%s)", checkpoint, type)
        return None, True

    entry = ManualEntry.objects.create(
        checkpoint=checkpoint,
        type=type,
        church=church or settings.DEFAULT_CHURCH,
        quantity=quantity,
        age_group=age_group or None,
        gender=gender or None,
        marketing_source=marketing_source or None,
        is_salvation=is_salvation,
        is_healing=is_healing,
        is_deliverance=is_deliverance,
        timestamp=now,
    )
    return entry, False
