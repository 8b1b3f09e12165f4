from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.serializers import ErrorResponseSerializer
from apps.people.exceptions import PersonNotFoundError
from apps.people.serializers import PersonSerializer
from apps.store.exceptions import InvalidOrderError
from apps.store.serializers import ManualSaleSerializer, SaleSerializer
from apps.store.services import record_manual_sale
from .serializers import (
    CheckpointSerializer,
    CountSerializer,
    CountResponseSerializer,
    ManualEntrySerializer,
    TrackSerializer,
    TrackResponseSerializer,
)
from .services import (
    CheckpointNotFoundError,
    get_checkpoint,
    list_checkpoints,
    record_count,
    track_scan,
    SCAN_SUCCESS,
    SCAN_IGNORED,
    SCAN_REENTRY,
)

SCAN_MESSAGES = {
    SCAN_IGNORED: 'Wait a moment before scanning again.',
    SCAN_REENTRY: 'Already entered today.',
}


@extend_schema(
    responses={200: CheckpointSerializer(many=True)},
    description="All checkpoints, for the staff location picker.",
    tags=['operations'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def checkpoints(request):
    return Response(CheckpointSerializer(list_checkpoints(), many=True).data)


@extend_schema(
    request=CountSerializer,
    responses={200: CountResponseSerializer, 404: ErrorResponseSerializer},
    description="Manual headcount. Repeated taps within 500 ms are ignored.",
    tags=['operations'],
)
@api_view(['POST'])
def count(request):
    serializer = CountSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        entry, ignored = record_count(**serializer.validated_data)
    except CheckpointNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    if ignored:
        return Response({'success': True, 'ignored': True})
    return Response({'success': True, 'entry': ManualEntrySerializer(entry).data})


@extend_schema(
    request=TrackSerializer,
    responses={200: TrackResponseSerializer, 404: ErrorResponseSerializer},
    description="QR code scan of a registered person.",
    tags=['operations'],
)
@api_view(['POST'])
def track(request):
    serializer = TrackSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        scan_status, movement = track_scan(**serializer.validated_data)
    except (CheckpointNotFoundError, PersonNotFoundError) as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    if scan_status != SCAN_SUCCESS:
        return Response({
            'success': True,
            'status': scan_status,
            'message': SCAN_MESSAGES[scan_status],
        })

    return Response({
        'success': True,
        'status': scan_status,
        'person': PersonSerializer(movement.person).data,
    })


@extend_schema(
    request=ManualSaleSerializer,
    responses={
        200: SaleSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Counter sale paid on the spot.",
    tags=['operations'],
)
@api_view(['POST'])
def manual_sale(request):
    serializer = ManualSaleSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data
    try:
        checkpoint = get_checkpoint(data['checkpoint_id'])
        sale = record_manual_sale(
            checkpoint=checkpoint,
            payment_method=data['payment_method'],
            buyer_type=data['buyer_type'],
            buyer_gender=data['buyer_gender'],
            items=data['items'],
        )
    except CheckpointNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InvalidOrderError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({'success': True, 'sale': SaleSerializer(sale).data})
