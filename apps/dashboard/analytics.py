"""
Dashboard Analytics Module
==========================

Aggregates the event data for the staff dashboard: attendance per day and
checkpoint, hourly timeline, store revenue, meetings and the church and
marketing-source rankings.

Attendance comes from two sources that are reduced the same way:

- manual entries typed by staff (count ``quantity`` each)
- scanner movements of registered people (count 1 each, age group
  derived from the person's age)

Every record lands in the bucket of its checkpoint and in ``Total`` of its
local day (``dd/mm``).

Classes:
    AttendanceRecord: One attendance fact, whatever its source.
    DashboardQueries: Static methods building the dashboard payload.

Example:
    Full payload for the configured event window::

        from apps.dashboard.analytics import DashboardQueries

        data = DashboardQueries.dashboard()
        data['checkpoints_data']['15/03']['Total']['gender']['F']
        data['sales_stats']['total_revenue']
"""

from collections import Counter, defaultdict
from dataclasses import dataclass
from datetime import datetime, time
from decimal import Decimal

from django.conf import settings
from django.utils import timezone
from django.utils.dateparse import parse_date

from apps.checkpoints.models import AgeGroup, ManualEntry, Movement
from apps.meetings.services import meeting_stats
from apps.people.models import Gender, Person, PersonType
from apps.people.services import CONSOLIDATION_PREFIX
from apps.store.models import Sale, SaleItem, SaleStatus

TOTAL_BUCKET = 'Total'
UNKNOWN_CHECKPOINT = 'Desconhecido'
# Buckets the front end always expects for a day
FIXED_BUCKETS = (TOTAL_BUCKET, 'Kids', 'Recepcao', 'Consolidacao')

CHILD_MAX_AGE = 12
YOUTH_MAX_AGE = 29

SOCIAL_NETWORKS = 'Redes Sociais'
CHURCH_SERVICE = 'Igreja / Culto'
SOURCE_ALIASES = {
    'Instagram': SOCIAL_NETWORKS,
    'WhatsApp': SOCIAL_NETWORKS,
    'Youtube / Tiktok': SOCIAL_NETWORKS,
    'Google / Site': SOCIAL_NETWORKS,
    'Pastor / Líder': CHURCH_SERVICE,
}

TOP_CHURCHES = 5

CANTEEN = 'CANTINA'
STORE = 'LOJA'
CANTEEN_CATEGORIES = {'CANTINA', 'FOOD'}

OUTCOMES = ('salvation', 'healing', 'deliverance')


@dataclass
class AttendanceRecord:
    timestamp: datetime
    checkpoint_name: str
    type: str
    quantity: int = 1
    gender: str = None
    age_group: str = None
    church: str = None
    marketing_source: str = None
    is_salvation: bool = False
    is_healing: bool = False
    is_deliverance: bool = False


def age_group_for(age):
    """Age bracket of a registered person, None when the age is unknown."""
    if age is None:
        return None
    if age <= CHILD_MAX_AGE:
        return AgeGroup.CHILD
    if age <= YOUTH_MAX_AGE:
        return AgeGroup.YOUTH
    return AgeGroup.ADULT


def day_key(timestamp):
    return timezone.localtime(timestamp).strftime('%d/%m')


def day_sort_key(key):
    day, month = (int(part) for part in key.split('/'))
    return month, day


def decision_kind(source):
    """
    'accepted' or 'reconciled' when the source records an altar decision
    (``ACEITOU``, ``Decisão: Aceitou Jesus``...), else None.
    """
    value = (source or '').upper()
    if 'ACEIT' in value:
        return 'accepted'
    if 'RECONCILIA' in value:
        return 'reconciled'
    return None


def is_marketing_source(source):
    if not source:
        return False
    if source.startswith(CONSOLIDATION_PREFIX) or source.upper() == 'VISITANTE':
        return False
    return decision_kind(source) is None


def empty_outcome():
    return {'total': 0, Gender.MALE.value: 0, Gender.FEMALE.value: 0,
            PersonType.VISITOR.value: 0, PersonType.MEMBER.value: 0}


def empty_stats():
    return {
        'total': 0,
        'type': {PersonType.VISITOR.value: 0, PersonType.MEMBER.value: 0},
        'gender': {Gender.MALE.value: 0, Gender.FEMALE.value: 0},
        'age': {group.value: 0 for group in AgeGroup},
        'marketing': {},
        'church': {},
        'accepted': 0,
        'reconciled': 0,
        'salvation': empty_outcome(),
        'healing': empty_outcome(),
        'deliverance': empty_outcome(),
    }


def add_to_stats(stats, record):
    """Add one attendance record to a stats bucket."""
    qty = record.quantity
    person_type = PersonType.MEMBER.value if record.type == PersonType.MEMBER else PersonType.VISITOR.value

    stats['total'] += qty
    stats['type'][person_type] += qty

    if record.gender in stats['gender']:
        stats['gender'][record.gender] += qty
    if record.age_group in stats['age']:
        stats['age'][record.age_group] += qty

    if is_marketing_source(record.marketing_source):
        source = record.marketing_source
        stats['marketing'][source] = stats['marketing'].get(source, 0) + qty
    if record.church:
        stats['church'][record.church] = stats['church'].get(record.church, 0) + qty

    kind = decision_kind(record.marketing_source)
    if kind:
        stats[kind] += qty

    for outcome in OUTCOMES:
        if not getattr(record, f'is_{outcome}'):
            continue
        counters = stats[outcome]
        counters['total'] += qty
        if record.gender in (Gender.MALE, Gender.FEMALE):
            counters[record.gender] += qty
        counters[person_type] += qty


def ranking(counter, limit=None):
    """``[{'name', 'value'}]`` sorted by value desc."""
    return [
        {'name': name, 'value': value}
        for name, value in counter.most_common(limit)
    ]


def aggregate_attendance(records):
    """
    Reduce attendance records into the dashboard attendance section.

    Returns:
        dict: ``checkpoints_data``, ``timeline``, ``available_days``,
        ``by_church`` and ``by_source``
    """
    checkpoints_data = {}
    timeline = defaultdict(lambda: defaultdict(int))
    churches = Counter()
    sources = Counter()

    for record in records:
        day = day_key(record.timestamp)
        buckets = checkpoints_data.setdefault(
            day, {name: empty_stats() for name in FIXED_BUCKETS}
        )
        checkpoint_name = record.checkpoint_name or UNKNOWN_CHECKPOINT
        if checkpoint_name not in buckets:
            buckets[checkpoint_name] = empty_stats()

        add_to_stats(buckets[checkpoint_name], record)
        if checkpoint_name != TOTAL_BUCKET:
            add_to_stats(buckets[TOTAL_BUCKET], record)

        timeline[day][timezone.localtime(record.timestamp).hour] += record.quantity

        if record.church:
            churches[record.church] += record.quantity
        if is_marketing_source(record.marketing_source):
            sources[SOURCE_ALIASES.get(record.marketing_source, record.marketing_source)] += record.quantity

    return {
        'checkpoints_data': checkpoints_data,
        'timeline': {day: dict(hours) for day, hours in timeline.items()},
        'available_days': sorted(checkpoints_data, key=day_sort_key),
        'by_church': ranking(churches, TOP_CHURCHES),
        'by_source': ranking(sources),
    }


class DashboardQueries:
    """
    Queries feeding the staff dashboard.

    Methods:
        event_window: Aware datetimes bounding the event.
        manual_records: Manual entries as attendance records.
        scanner_records: Scanner movements as attendance records.
        sales_stats: Revenue, category split and buyer demographics.
        consolidation_count: People registered by the consolidation team.
        dashboard: The full payload.

    Note:
        All methods return plain dictionaries and lists, ready for the
        JSON response.
    """

    @staticmethod
    def event_window(start_date=None, end_date=None):
        """
        Local-day bounds of the event, from the arguments or the
        ``EVENT_START`` / ``EVENT_END`` settings.
        """
        start_date = start_date or parse_date(settings.EVENT_START)
        end_date = end_date or parse_date(settings.EVENT_END)
        tz = timezone.get_current_timezone()
        start = timezone.make_aware(datetime.combine(start_date, time.min), tz)
        end = timezone.make_aware(datetime.combine(end_date, time.max), tz)
        return start, end

    @staticmethod
    def manual_records(start, end):
        entries = (
            ManualEntry.objects
            .filter(timestamp__gte=start, timestamp__lte=end)
            .select_related('checkpoint')
        )
        for entry in entries.iterator():
            yield AttendanceRecord(
                timestamp=entry.timestamp,
                checkpoint_name=entry.checkpoint.name if entry.checkpoint_id else None,
                type=entry.type,
                quantity=entry.quantity,
                gender=entry.gender,
                age_group=entry.age_group,
                church=entry.church,
                marketing_source=entry.marketing_source,
                is_salvation=entry.is_salvation,
                is_healing=entry.is_healing,
                is_deliverance=entry.is_deliverance,
            )

    @staticmethod
    def scanner_records(start, end):
        movements = (
            Movement.objects
            .filter(timestamp__gte=start, timestamp__lte=end)
            .select_related('checkpoint', 'person')
        )
        for movement in movements.iterator():
            person = movement.person
            yield AttendanceRecord(
                timestamp=movement.timestamp,
                checkpoint_name=movement.checkpoint.name if movement.checkpoint_id else None,
                type=person.type,
                gender=person.gender,
                age_group=age_group_for(person.age),
                church=person.church,
                marketing_source=person.marketing_source,
            )

    @staticmethod
    def sales_stats(start, end):
        """
        Revenue of paid and delivered sales in the window.

        Items of CANTINA or FOOD products count as canteen, everything else
        (removed products included) as store.
        """
        stats = {
            'total_revenue': Decimal('0.00'),
            'by_category': {STORE: Decimal('0.00'), CANTEEN: Decimal('0.00')},
            'demographics': {PersonType.MEMBER.value: 0, PersonType.VISITOR.value: 0},
        }
        sales = Sale.objects.filter(
            status__in=[SaleStatus.PAID, SaleStatus.DELIVERED],
            created_at__gte=start,
            created_at__lte=end,
        )

        for buyer_type in sales.values_list('buyer_type', flat=True):
            key = PersonType.MEMBER.value if buyer_type == PersonType.MEMBER else PersonType.VISITOR.value
            stats['demographics'][key] += 1

        items = SaleItem.objects.filter(sale__in=sales).select_related('product')
        for item in items.iterator():
            amount = item.price * item.quantity
            category = (item.product.category or '').upper() if item.product else ''
            bucket = CANTEEN if category in CANTEEN_CATEGORIES else STORE
            stats['by_category'][bucket] += amount
            stats['total_revenue'] += amount

        return stats

    @staticmethod
    def consolidation_count():
        return Person.objects.filter(marketing_source__startswith=CONSOLIDATION_PREFIX).count()

    @staticmethod
    def dashboard(start_date=None, end_date=None):
        """
        Build the dashboard payload.

        Args:
            start_date (date, optional): First day, defaults to EVENT_START.
            end_date (date, optional): Last day, defaults to EVENT_END.

        Returns:
            dict: Attendance (``checkpoints_data``, ``timeline``,
            ``available_days``, ``by_church``, ``by_source``), counters
            (``manual_count``, ``scanner_count``, ``consolidation_count``),
            ``sales_stats`` and ``meeting_stats``.
        """
        start, end = DashboardQueries.event_window(start_date, end_date)

        manual = list(DashboardQueries.manual_records(start, end))
        scanned = list(DashboardQueries.scanner_records(start, end))

        data = aggregate_attendance(manual + scanned)
        data.update({
            'manual_count': sum(record.quantity for record in manual),
            'scanner_count': len(scanned),
            'consolidation_count': DashboardQueries.consolidation_count(),
            'sales_stats': DashboardQueries.sales_stats(start, end),
            'meeting_stats': meeting_stats(),
        })
        return data
