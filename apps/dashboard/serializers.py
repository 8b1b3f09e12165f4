from rest_framework import serializers


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class DashboardQuerySerializer(serializers.Serializer):
    """
    Optional date range overriding the configured event window.

    Query Parameters:
        start_date (date): First day (YYYY-MM-DD)
        end_date (date): Last day (YYYY-MM-DD)
    """

    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, attrs):
        start = attrs.get('start_date')
        end = attrs.get('end_date')
        if start and end and start > end:
            raise serializers.ValidationError({
                'start_date': 'Start date must be before end date'
            })
        return attrs


# =============================================================================
# Response Serializers (API documentation)
# =============================================================================

class OutcomeSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    M = serializers.IntegerField()
    F = serializers.IntegerField()
    VISITOR = serializers.IntegerField()
    MEMBER = serializers.IntegerField()


class StatsBucketSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    type = serializers.DictField(child=serializers.IntegerField())
    gender = serializers.DictField(child=serializers.IntegerField())
    age = serializers.DictField(child=serializers.IntegerField())
    marketing = serializers.DictField(child=serializers.IntegerField())
    church = serializers.DictField(child=serializers.IntegerField())
    accepted = serializers.IntegerField()
    reconciled = serializers.IntegerField()
    salvation = OutcomeSerializer()
    healing = OutcomeSerializer()
    deliverance = OutcomeSerializer()


class RankingSerializer(serializers.Serializer):
    name = serializers.CharField()
    value = serializers.IntegerField()


class SalesStatsSerializer(serializers.Serializer):
    total_revenue = serializers.DecimalField(max_digits=12, decimal_places=2)
    by_category = serializers.DictField(
        child=serializers.DecimalField(max_digits=12, decimal_places=2)
    )
    demographics = serializers.DictField(child=serializers.IntegerField())


class MeetingStatsSerializer(serializers.Serializer):
    realizadas = serializers.IntegerField()
    agendadas = serializers.IntegerField()


class DashboardResponseSerializer(serializers.Serializer):
    checkpoints_data = serializers.DictField(
        child=serializers.DictField(child=StatsBucketSerializer()),
        help_text='Day (dd/mm) -> bucket name -> stats',
    )
    timeline = serializers.DictField(
        child=serializers.DictField(child=serializers.IntegerField()),
        help_text='Day (dd/mm) -> hour -> people',
    )
    available_days = serializers.ListField(child=serializers.CharField())
    manual_count = serializers.IntegerField()
    scanner_count = serializers.IntegerField()
    consolidation_count = serializers.IntegerField()
    sales_stats = SalesStatsSerializer()
    meeting_stats = MeetingStatsSerializer()
    by_church = RankingSerializer(many=True)
    by_source = RankingSerializer(many=True)
