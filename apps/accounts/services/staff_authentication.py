"""Staff authentication service."""

import logging

from rest_framework_simplejwt.tokens import RefreshToken

from apps.people.models import Person, Role
from .exceptions import MissingEmailError, StaffAccessDeniedError

logger = logging.getLogger(__name__)


def authenticate_staff(*, email: str) -> Person:
    """
    Authenticate a staff member by e-mail alone.

    The event has no passwords: the staff list is curated by the admins and
    the login screen only asks for the e-mail.

    Args:
        email: Staff e-mail, any casing

    Returns:
        The staff Person

    Raises:
        MissingEmailError: If no e-mail was given
        StaffAccessDeniedError: If no staff member has this e-mail
    """
    email = (email or '').strip()
    if not email:
        raise MissingEmailError("E-mail is required")

    person = Person.objects.filter(email__iexact=email, role=Role.STAFF).first()
    if person is None:
        logger.info("Denied staff login for %s", email)
        raise StaffAccessDeniedError("Access denied")

    return person


def issue_tokens(person: Person) -> dict:
    """
    Build the JWT pair for a person.

    The ``role`` claim travels with the token so requests can be authorized
    without a database hit.
    """
    refresh = RefreshToken.for_user(person)
    refresh['role'] = person.role
    refresh['name'] = person.name

    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }
