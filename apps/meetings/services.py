"""
Meetings Services Module
========================

Volunteer meetings and the manual meeting counter shown on the dashboard.

Functions:
    list_meetings: Promote past scheduled meetings, then list all.
    create_meeting: Schedule or log a meeting.
    delete_meeting: Remove a meeting.
    get_meeting_count: Current value of the counter.
    increment_meeting_count: Add one to the counter.
    meeting_stats: Meetings held and scheduled, for the dashboard.
"""

import logging

from django.db import transaction
from django.db.models import Count
from django.utils import timezone

from .exceptions import MeetingNotFoundError
from .models import GlobalConfig, Meeting, MeetingType, MEETING_COUNT_KEY

logger = logging.getLogger(__name__)


def promote_past_meetings(now=None):
    """Scheduled meetings whose date has passed are considered held."""
    now = now or timezone.now()
    updated = Meeting.objects.filter(
        type=MeetingType.SCHEDULED,
        date__lt=now,
    ).update(type=MeetingType.HELD)
    if updated:
        logger.info("%d past meetings marked as held", updated)
    return updated


def list_meetings():
    promote_past_meetings()
    return Meeting.objects.order_by('-date')


def create_meeting(*, title, date, type=MeetingType.SCHEDULED, notes='', created_by=''):
    return Meeting.objects.create(
        title=title,
        date=date,
        type=type,
        notes=notes or '',
        created_by=created_by or '',
    )


def delete_meeting(meeting_id):
    """
    Raises:
        MeetingNotFoundError: If meeting doesn't exist
    """
    deleted, _ = Meeting.objects.filter(id=meeting_id).delete()
    if not deleted:
        raise MeetingNotFoundError(f"Meeting {meeting_id} not found")


def _as_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def get_meeting_count():
    config = GlobalConfig.objects.filter(key=MEETING_COUNT_KEY).first()
    return _as_int(config.value) if config else 0


@transaction.atomic
def increment_meeting_count():
    config, _ = GlobalConfig.objects.select_for_update().get_or_create(
        key=MEETING_COUNT_KEY,
        defaults={'value': '0'},
    )
    count = _as_int(config.value) + 1
    config.value = str(count)
    config.save(update_fields=['value'])
    return count


def meeting_stats():
    """``{'realizadas': held, 'agendadas': scheduled}``"""
    counts = {
        row['type']: row['total']
        for row in Meeting.objects.order_by().values('type').annotate(total=Count('id'))
    }
    return {
        'realizadas': counts.get(MeetingType.HELD, 0),
        'agendadas': counts.get(MeetingType.SCHEDULED, 0),
    }
