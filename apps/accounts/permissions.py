"""
Custom permission classes for the staff area.

Staff are ``Person`` rows, not Django users. Requests authenticate with
``JWTStatelessUserAuthentication``, so ``request.user`` is a ``TokenUser``
whose claims were written by ``issue_tokens``.

Permission Classes:
    IsEventStaff - Requires a token carrying the STAFF role

Usage:
    from apps.accounts.permissions import IsEventStaff

    @api_view(['POST'])
    @permission_classes([IsEventStaff])
    def count(request):
        ...
"""

from rest_framework.permissions import BasePermission

from apps.people.models import Role


class IsEventStaff(BasePermission):
    """
    Allow only requests authenticated with a staff token.

    Anonymous requests are rejected before the role is looked at, which
    makes DRF answer 401 instead of 403.
    """

    message = 'Only event staff can access this resource.'

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        token = getattr(user, 'token', None)
        if token is None:
            return False

        return token.get('role') == Role.STAFF
