from rest_framework import serializers

from apps.people.models import PersonType, Gender
from apps.people.serializers import PersonSerializer
from .models import Checkpoint, ManualEntry

# One tap never stands for more people than this
MAX_COUNT_QUANTITY = 1000


# =============================================================================
# Input Serializers
# =============================================================================

class CountSerializer(serializers.Serializer):
    """
    Validate a manual headcount tap.

    Fields:
        checkpoint_id (uuid): Where the count happened
        type (str): MEMBER or VISITOR
        quantity (int): People counted at once, 1 to MAX_COUNT_QUANTITY
        age_group (str): Free text; the dashboard only buckets CRIANCA, JOVEM and ADULTO
        gender (str): Anything starting with "M" is male, the rest female
    """

    checkpoint_id = serializers.UUIDField()
    type = serializers.ChoiceField(choices=[PersonType.MEMBER, PersonType.VISITOR])
    church = serializers.CharField(required=False, allow_blank=True, max_length=120)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_COUNT_QUANTITY, default=1)
    age_group = serializers.CharField(required=False, allow_blank=True, max_length=10)
    gender = serializers.CharField(required=False, allow_blank=True, max_length=10)
    marketing_source = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=200)
    is_salvation = serializers.BooleanField(default=False)
    is_healing = serializers.BooleanField(default=False)
    is_deliverance = serializers.BooleanField(default=False)

    def validate_gender(self, value):
        if not value:
            return None
        return Gender.MALE if value.startswith('M') else Gender.FEMALE


class TrackSerializer(serializers.Serializer):
    person_id = serializers.UUIDField()
    checkpoint_id = serializers.UUIDField()


# =============================================================================
# Output Serializers
# =============================================================================

class CheckpointSerializer(serializers.ModelSerializer):
    allows_reentry = serializers.BooleanField(read_only=True)

    class Meta:
        model = Checkpoint
        fields = ['id', 'name', 'category', 'allows_reentry']
        read_only_fields = fields


class ManualEntrySerializer(serializers.ModelSerializer):
    class Meta:
        model = ManualEntry
        fields = [
            'id',
            'checkpoint',
            'type',
            'church',
            'age_group',
            'gender',
            'quantity',
            'marketing_source',
            'is_salvation',
            'is_healing',
            'is_deliverance',
            'timestamp',
        ]
        read_only_fields = fields


class CountResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    ignored = serializers.BooleanField(required=False)
    entry = ManualEntrySerializer(required=False)


class TrackResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    status = serializers.ChoiceField(choices=['SUCCESS', 'IGNORED', 'REENTRY'])
    message = serializers.CharField(required=False)
    person = PersonSerializer(required=False)
