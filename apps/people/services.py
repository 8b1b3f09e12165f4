"""
People Services Module
======================

Business logic for registering and maintaining the people of the event:
full registration, the quick register used at the altar and kids room,
searches for the check-in screens, data clean-up and the CSV report.

Functions:
    register_person: Full registration from the public form.
    quick_register: Fast registration, optionally counted at a checkpoint.
    save_consolidation_card: Store a decision card filled at consolidation.
    search_people: Name search with "already entered today" flag.
    lookup_people: Name or phone search for the kids check-in.
    update_person: Fill missing data of a person.
    export_people_csv: Write the attendance report as CSV.

Example:
    Registering someone at the kids room::

        from apps.people.services import quick_register

        person = quick_register(
            name='Maria Souza',
            phone='(31) 99999-0000',
            department='KIDS',
        )
        # person.phone == '31999990000' and a Movement was recorded at
        # the first KIDS checkpoint
"""

import csv
import logging

from django.db import IntegrityError, transaction
from django.db.models import Exists, OuterRef, Q
from django.utils import timezone

from apps.checkpoints.models import Checkpoint, CheckpointCategory, Movement
from .exceptions import DuplicatePersonError, PersonNotFoundError
from .models import Person, PersonType, Role

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 10
LOOKUP_LIMIT = 5
INCOMPLETE_LIMIT = 50

CONSOLIDATION_PREFIX = 'Decisão'
CONSOLIDATION_CHURCH = 'Consolidação'

CSV_HEADER = ['Nome', 'Idade', 'Tipo', 'Genero', 'Igreja', 'WhatsApp', 'Origem', 'Data Cadastro']

_DEPARTMENT_CATEGORIES = {
    'KIDS': CheckpointCategory.KIDS,
    'CONSOLIDATION': CheckpointCategory.CONSOLIDATION,
}


def only_digits(value):
    """Strip everything but digits (phones, CPF)."""
    if not value:
        return None
    return ''.join(c for c in str(value) if c.isdigit())


MAX_AGE = 150


def parse_age(value):
    """Ages arrive as numbers or strings from the forms; garbage means unknown."""
    try:
        age = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return age if 0 < age <= MAX_AGE else None


def start_of_today():
    """Midnight of the current local day."""
    return timezone.localtime().replace(hour=0, minute=0, second=0, microsecond=0)


def get_person(person_id):
    try:
        return Person.objects.get(id=person_id)
    except Person.DoesNotExist:
        raise PersonNotFoundError(f"Person {person_id} not found")


def get_person_by_email(email):
    """Case-insensitive e-mail lookup."""
    person = Person.objects.filter(email__iexact=str(email).strip()).first()
    if person is None:
        raise PersonNotFoundError("Person not found")
    return person


@transaction.atomic
def register_person(
    *,
    name,
    email=None,
    phone=None,
    type=PersonType.VISITOR,
    department=None,
    church=None,
    gender=None,
    marketing_source=None,
    age=None,
    is_staff=False,
):
    """
    Create a person from the full registration form.

    Raises:
        DuplicatePersonError: If the e-mail is already registered
    """
    email = email.strip() if email else None
    if email and Person.objects.filter(email__iexact=email).exists():
        raise DuplicatePersonError(f"E-mail {email} is already registered")

    try:
        return Person.objects.create(
            name=name,
            email=email,
            phone=phone or None,
            type=type,
            department=department or None,
            church=church or None,
            gender=gender or None,
            marketing_source=marketing_source or None,
            age=parse_age(age),
            role=Role.STAFF if is_staff else Role.PARTICIPANT,
        )
    except IntegrityError:
        raise DuplicatePersonError(f"E-mail {email} is already registered")


@transaction.atomic
def quick_register(
    *,
    name,
    phone=None,
    email=None,
    age=None,
    decision_type=None,
    department=None,
):
    """
    Register someone in a hurry (altar, kids room).

    With an e-mail the person is upserted on it; without one a new visitor
    is always created. When a department is given the person is also counted
    at the first checkpoint of the matching category.

    Args:
        name: Person name
        phone: Phone/WhatsApp, any formatting
        email: Optional e-mail used as the upsert key
        age: Age as number or string
        decision_type: ACEITOU, RECONCILIACAO or VISITANTE (altar)
        department: KIDS, CONSOLIDATION or anything else for GENERAL

    Returns:
        The created or updated Person
    """
    clean_phone = only_digits(phone)

    if email:
        updates = {'name': name, 'phone': clean_phone}
        if decision_type:
            updates['marketing_source'] = decision_type
        person = Person.objects.filter(email__iexact=email).first()
        if person:
            for field, value in updates.items():
                setattr(person, field, value)
            person.save(update_fields=list(updates))
        else:
            person = Person.objects.create(
                email=email,
                age=parse_age(age),
                type=PersonType.VISITOR,
                **updates,
            )
    else:
        person = Person.objects.create(
            name=name,
            phone=clean_phone,
            age=parse_age(age),
            type=PersonType.VISITOR,
            marketing_source=decision_type or None,
        )

    if department:
        category = _DEPARTMENT_CATEGORIES.get(department, CheckpointCategory.GENERAL)
        checkpoint = Checkpoint.objects.filter(category=category).order_by('name').first()
        if checkpoint:
            Movement.objects.create(person=person, checkpoint=checkpoint)
        else:
            logger.warning("No %s checkpoint to count quick register of %s", category, person.id)

    return person


def save_consolidation_card(*, name, phone=None, decision=None, observer=None):
    """Store the card filled by the consolidation team after a decision."""
    return Person.objects.create(
        name=name,
        phone=phone or None,
        type=PersonType.VISITOR,
        role=Role.PARTICIPANT,
        marketing_source=f"{CONSOLIDATION_PREFIX}: {decision}",
        church=CONSOLIDATION_CHURCH,
        department=observer or None,
    )


def search_people(search):
    """
    Name search for the check-in screen.

    Each person carries ``has_entered``: whether they scanned in anywhere
    today.
    """
    if not search:
        return Person.objects.none()

    entered_today = Movement.objects.filter(
        person=OuterRef('pk'),
        timestamp__gte=start_of_today(),
    )
    return (
        Person.objects
        .filter(name__icontains=search)
        .annotate(has_entered=Exists(entered_today))
        [:SEARCH_LIMIT]
    )


def lookup_people(query):
    """Name or phone search used by the kids check-in."""
    query = query or ''
    return Person.objects.filter(
        Q(name__icontains=query) | Q(phone__contains=query)
    )[:LOOKUP_LIMIT]


def incomplete_people():
    """People still missing gender, phone, origin or age."""
    return Person.objects.filter(
        Q(gender__isnull=True) |
        Q(phone__isnull=True) |
        Q(marketing_source__isnull=True) |
        Q(age__isnull=True)
    ).order_by('name')[:INCOMPLETE_LIMIT]


@transaction.atomic
def update_person(*, person_id, data):
    """
    Fill in missing data. Empty values leave the stored value untouched.

    Raises:
        PersonNotFoundError: If person doesn't exist
    """
    try:
        person = Person.objects.select_for_update().get(id=person_id)
    except Person.DoesNotExist:
        raise PersonNotFoundError(f"Person {person_id} not found")

    allowed_fields = ['gender', 'phone', 'marketing_source', 'church']
    for field in allowed_fields:
        value = data.get(field)
        if value:
            setattr(person, field, value)

    age = parse_age(data.get('age'))
    if age:
        person.age = age

    person.save()
    return person


@transaction.atomic
def promote_to_staff(*, email):
    """Give staff access to an existing person."""
    person = Person.objects.select_for_update().filter(email__iexact=str(email).strip()).first()
    if person is None:
        raise PersonNotFoundError("Person not found")

    person.role = Role.STAFF
    person.save(update_fields=['role'])
    logger.info("Person %s promoted to staff", person.id)
    return person


def export_people_csv(stream):
    """
    Write every person, newest first, as the attendance report.

    Commas are stripped from names to keep the spreadsheet columns intact.
    """
    writer = csv.writer(stream)
    writer.writerow(CSV_HEADER)

    for person in Person.objects.order_by('-created_at').iterator():
        writer.writerow([
            person.name.replace(',', ''),
            person.age or '',
            person.type,
            person.gender or '',
            person.church or '',
            person.phone or '',
            person.marketing_source or '',
            timezone.localtime(person.created_at).strftime('%d/%m/%Y'),
        ])
    return stream


@transaction.atomic
def upsert_buyer(*, email, name, phone=None, age=None, church=None, gender=None, default_gender=None):
    """
    Find the buyer by e-mail and refresh their data, or register a visitor.

    Empty values never overwrite stored data. ``default_gender`` is only
    used when creating.
    """
    person = Person.objects.select_for_update().filter(email__iexact=email).first()
    age = parse_age(age)

    if person is None:
        return Person.objects.create(
            name=name,
            email=email,
            phone=phone or None,
            age=age,
            church=church or None,
            gender=gender or default_gender,
            type=PersonType.VISITOR,
            role=Role.PARTICIPANT,
        )

    person.name = name
    if phone:
        person.phone = phone
    if age:
        person.age = age
    if church:
        person.church = church
    if gender:
        person.gender = gender
    person.save()
    return person
