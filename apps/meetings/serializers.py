from rest_framework import serializers
from .models import Meeting, MeetingType


class MeetingCreateSerializer(serializers.Serializer):
    """
    Validate a new meeting.

    ``created_by`` defaults to the name of the logged staff member.
    """

    title = serializers.CharField(max_length=200)
    date = serializers.DateTimeField()
    type = serializers.ChoiceField(choices=MeetingType.choices, default=MeetingType.SCHEDULED)
    notes = serializers.CharField(required=False, allow_blank=True, default='')
    created_by = serializers.CharField(required=False, allow_blank=True, max_length=200)


class MeetingSerializer(serializers.ModelSerializer):
    class Meta:
        model = Meeting
        fields = ['id', 'title', 'date', 'type', 'notes', 'created_by', 'created_at']
        read_only_fields = fields


class MeetingCountSerializer(serializers.Serializer):
    count = serializers.IntegerField()
