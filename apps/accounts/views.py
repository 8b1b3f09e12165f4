from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.people.serializers import PersonSerializer
from apps.people.services import promote_to_staff
from apps.people.exceptions import PersonNotFoundError
from .permissions import IsEventStaff
from .serializers import (
    StaffLoginSerializer,
    PromoteStaffSerializer,
    LoginResponseSerializer,
    ErrorResponseSerializer,
)
from .services import (
    authenticate_staff,
    issue_tokens,
    MissingEmailError,
    StaffAccessDeniedError,
)


@extend_schema(
    request=StaffLoginSerializer,
    responses={
        200: LoginResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Log a staff member in by e-mail and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with the staff e-mail."""
    serializer = StaffLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        person = authenticate_staff(email=serializer.validated_data.get('email'))
    except MissingEmailError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except StaffAccessDeniedError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response({
        'person': PersonSerializer(person).data,
        'tokens': issue_tokens(person),
    })


@extend_schema(
    request=PromoteStaffSerializer,
    responses={
        200: PersonSerializer,
        404: ErrorResponseSerializer,
    },
    description="Grant staff access to an already registered person.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsEventStaff])
def promote(request):
    """Make a registered person staff."""
    serializer = PromoteStaffSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        person = promote_to_staff(email=serializer.validated_data['email'])
    except PersonNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(PersonSerializer(person).data)
