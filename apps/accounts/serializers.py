from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.serializers import TokenRefreshSerializer
from rest_framework_simplejwt.settings import api_settings

from apps.people.models import Person
from apps.people.serializers import PersonSerializer


class StaffLoginSerializer(serializers.Serializer):
    """Validate the staff login form (e-mail only)."""

    email = serializers.CharField(required=False, allow_blank=True, max_length=255)


class PromoteStaffSerializer(serializers.Serializer):
    """Validate input for granting staff access."""

    email = serializers.EmailField()


class StaffTokenRefreshSerializer(TokenRefreshSerializer):
    """
    Refresh serializer bound to ``Person`` instead of the Django user model.

    The new access token gets the person's current role, so demoted staff
    lose access at the next refresh.
    """

    def validate(self, attrs):
        refresh = self.token_class(attrs['refresh'])

        person = Person.objects.filter(id=refresh.get(api_settings.USER_ID_CLAIM)).first()
        if person is None or not person.is_staff_member:
            raise AuthenticationFailed('No staff member found for this token.')

        access = refresh.access_token
        access['role'] = person.role
        access['name'] = person.name
        return {'access': str(access)}


class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class LoginResponseSerializer(serializers.Serializer):
    person = PersonSerializer()
    tokens = TokensResponseSerializer()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
