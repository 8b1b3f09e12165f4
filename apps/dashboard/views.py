from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .analytics import DashboardQueries
from .serializers import DashboardQuerySerializer, DashboardResponseSerializer


@extend_schema(
    parameters=[DashboardQuerySerializer],
    responses={200: DashboardResponseSerializer},
    description="Aggregated attendance, sales and meetings of the event. "
                "Defaults to the configured event window.",
    tags=['dashboard'],
)
@api_view(['GET'])
def dashboard(request):
    """Staff dashboard - thin HTTP handler."""
    query_serializer = DashboardQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    data = DashboardQueries.dashboard(
        start_date=params.get('start_date'),
        end_date=params.get('end_date'),
    )
    return Response(data)
