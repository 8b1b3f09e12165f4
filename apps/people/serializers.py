from rest_framework import serializers
from .models import Person, PersonType, Gender


# =============================================================================
# Input Serializers
# =============================================================================

class AgeField(serializers.Field):
    """Age sent either as number or string; anything non-numeric is unknown."""

    def to_internal_value(self, data):
        if data in (None, ''):
            return None
        return data

    def to_representation(self, value):
        return value


class PersonRegistrationSerializer(serializers.Serializer):
    """
    Validate the public registration form.

    Fields:
        name (str): At least 3 characters
        email (str): Optional, blank allowed
        type (str): MEMBER, VISITOR, LEADER, PASTOR or STAFF
        is_staff (bool): Grants the STAFF role
    """

    name = serializers.CharField(min_length=3, max_length=200)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    phone = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=32)
    type = serializers.ChoiceField(choices=PersonType.choices, default=PersonType.VISITOR)
    department = serializers.CharField(required=False, allow_blank=True, max_length=120)
    church = serializers.CharField(required=False, allow_blank=True, max_length=120)
    gender = serializers.CharField(required=False, allow_blank=True, max_length=10)
    marketing_source = serializers.CharField(required=False, allow_blank=True, max_length=200)
    age = AgeField(required=False, allow_null=True)
    is_staff = serializers.BooleanField(required=False, default=False)

    def validate_gender(self, value):
        """Normalize free-text gender to M/F."""
        if not value:
            return None
        return Gender.MALE if value.upper().startswith('M') else Gender.FEMALE


class QuickRegisterSerializer(serializers.Serializer):
    """
    Validate the quick register used at the altar and the kids room.

    ``guardian_name`` is accepted from the kids form but not stored.
    """

    DECISION_CHOICES = ['ACEITOU', 'RECONCILIACAO', 'VISITANTE']

    name = serializers.CharField(min_length=3, max_length=200)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=32)
    email = serializers.EmailField(required=False, allow_blank=True)
    age = AgeField(required=False, allow_null=True)
    guardian_name = serializers.CharField(required=False, allow_blank=True, max_length=200)
    decision_type = serializers.ChoiceField(choices=DECISION_CHOICES, required=False)
    department = serializers.CharField(required=False, allow_blank=True, max_length=120)


class ConsolidationCardSerializer(serializers.Serializer):
    """Validate a decision card from the consolidation team."""

    name = serializers.CharField(max_length=200)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=32)
    decision = serializers.CharField(max_length=100)
    observer = serializers.CharField(required=False, allow_blank=True, max_length=120)


class PersonUpdateSerializer(serializers.Serializer):
    """Fields staff may fill in during data clean-up."""

    gender = serializers.ChoiceField(choices=Gender.choices, required=False, allow_blank=True)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=32)
    marketing_source = serializers.CharField(required=False, allow_blank=True, max_length=200)
    age = AgeField(required=False, allow_null=True)
    church = serializers.CharField(required=False, allow_blank=True, max_length=120)


class SearchQuerySerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True, default='')


class LookupQuerySerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True, default='')


class EmailQuerySerializer(serializers.Serializer):
    email = serializers.CharField()


# =============================================================================
# Output Serializers
# =============================================================================

class PersonSerializer(serializers.ModelSerializer):
    """Main serializer for people."""

    class Meta:
        model = Person
        fields = [
            'id',
            'name',
            'email',
            'phone',
            'type',
            'role',
            'church',
            'gender',
            'age',
            'department',
            'marketing_source',
            'created_at',
        ]
        read_only_fields = fields


class PersonSearchSerializer(PersonSerializer):
    """Search result with today's check-in flag."""

    has_entered = serializers.BooleanField(read_only=True)

    class Meta(PersonSerializer.Meta):
        fields = PersonSerializer.Meta.fields + ['has_entered']
        read_only_fields = fields


class PersonMinimalSerializer(serializers.ModelSerializer):
    """Minimal person info for nested serialization."""

    class Meta:
        model = Person
        fields = ['id', 'name', 'email', 'phone', 'type']
        read_only_fields = fields
