from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from drf_spectacular.types import OpenApiTypes

from apps.accounts.serializers import ErrorResponseSerializer
from .exceptions import MeetingNotFoundError
from .serializers import MeetingCreateSerializer, MeetingSerializer, MeetingCountSerializer
from . import services


@extend_schema(
    methods=['GET'],
    responses={200: MeetingSerializer(many=True)},
    description="List meetings, newest first. Scheduled meetings already "
                "past are marked as held first.",
    tags=['meetings'],
)
@extend_schema(
    methods=['POST'],
    request=MeetingCreateSerializer,
    responses={201: OpenApiTypes.OBJECT},
    tags=['meetings'],
)
@api_view(['GET', 'POST'])
def meetings(request):
    if request.method == 'GET':
        return Response(MeetingSerializer(services.list_meetings(), many=True).data)

    serializer = MeetingCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data
    if not data.get('created_by'):
        data['created_by'] = request.user.token.get('name', '')

    meeting = services.create_meeting(**data)
    return Response(
        {'success': True, 'meeting': MeetingSerializer(meeting).data},
        status=status.HTTP_201_CREATED,
    )


@extend_schema(
    responses={200: OpenApiTypes.OBJECT, 404: ErrorResponseSerializer},
    tags=['meetings'],
)
@api_view(['DELETE'])
def delete_meeting(request, meeting_id):
    try:
        services.delete_meeting(meeting_id)
    except MeetingNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    return Response({'success': True})


@extend_schema(
    responses={200: MeetingCountSerializer},
    tags=['meetings'],
)
@api_view(['GET'])
def meeting_count(request):
    return Response({'count': services.get_meeting_count()})


@extend_schema(
    request=None,
    responses={200: MeetingCountSerializer},
    tags=['meetings'],
)
@api_view(['POST'])
def increment_meeting_count(request):
    return Response({'count': services.increment_meeting_count()})
