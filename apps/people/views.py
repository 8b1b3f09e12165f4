import io
import logging

from django.conf import settings
from django.http import HttpResponse
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.serializers import ErrorResponseSerializer
from apps.store.services import open_orders_for_person
from apps.store.serializers import SaleSerializer
from .exceptions import DuplicatePersonError, PersonNotFoundError
from .serializers import (
    PersonSerializer,
    PersonSearchSerializer,
    PersonMinimalSerializer,
    PersonRegistrationSerializer,
    QuickRegisterSerializer,
    ConsolidationCardSerializer,
    PersonUpdateSerializer,
    SearchQuerySerializer,
    LookupQuerySerializer,
    EmailQuerySerializer,
)
from . import services

logger = logging.getLogger(__name__)


@extend_schema(
    request=PersonRegistrationSerializer,
    responses={201: PersonSerializer, 400: ErrorResponseSerializer},
    description="Public registration form.",
    tags=['people'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    serializer = PersonRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        person = services.register_person(**serializer.validated_data)
    except DuplicatePersonError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(PersonSerializer(person).data, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[
        OpenApiParameter('search', OpenApiTypes.STR, description='Part of the name'),
    ],
    responses={200: PersonSearchSerializer(many=True)},
    description="Search people by name for the check-in screen. "
                "Each result says whether the person already entered today.",
    tags=['people'],
)
@api_view(['GET'])
def search(request):
    query = SearchQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    people = services.search_people(query.validated_data['search'])
    return Response(PersonSearchSerializer(people, many=True).data)


@extend_schema(
    parameters=[
        OpenApiParameter('q', OpenApiTypes.STR, description='Part of the name or phone'),
    ],
    responses={200: PersonMinimalSerializer(many=True)},
    tags=['people'],
)
@api_view(['GET'])
def lookup(request):
    query = LookupQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    people = services.lookup_people(query.validated_data['q'])
    return Response(PersonMinimalSerializer(people, many=True).data)


@extend_schema(
    request=QuickRegisterSerializer,
    responses={201: PersonSerializer},
    description="Fast registration at the altar or kids room. "
                "With a department the person is also counted at a checkpoint.",
    tags=['people'],
)
@api_view(['POST'])
def quick_register(request):
    serializer = QuickRegisterSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data
    person = services.quick_register(
        name=data['name'],
        phone=data.get('phone'),
        email=data.get('email') or None,
        age=data.get('age'),
        decision_type=data.get('decision_type'),
        department=data.get('department') or None,
    )
    return Response(PersonSerializer(person).data, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[
        OpenApiParameter('email', OpenApiTypes.STR, required=True),
    ],
    responses={200: PersonSerializer, 404: ErrorResponseSerializer},
    tags=['people'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def by_email(request):
    query = EmailQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    try:
        person = services.get_person_by_email(query.validated_data['email'])
    except PersonNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(PersonSerializer(person).data)


@extend_schema(
    responses={200: PersonSerializer(many=True)},
    description="People still missing gender, phone, origin or age.",
    tags=['people'],
)
@api_view(['GET'])
def incomplete(request):
    return Response(PersonSerializer(services.incomplete_people(), many=True).data)


@extend_schema(
    request=PersonUpdateSerializer,
    responses={200: PersonSerializer, 404: ErrorResponseSerializer},
    description="Fill in missing data. Empty values keep the stored ones.",
    tags=['people'],
)
@api_view(['PUT', 'PATCH'])
def update_person(request, person_id):
    serializer = PersonUpdateSerializer(data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)

    try:
        person = services.update_person(person_id=person_id, data=serializer.validated_data)
    except PersonNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(PersonSerializer(person).data)


@extend_schema(
    responses={(200, 'text/csv'): OpenApiTypes.STR},
    description="Attendance report as CSV.",
    tags=['people'],
)
@api_view(['GET'])
def export_csv(request):
    content = services.export_people_csv(io.StringIO()).getvalue()

    response = HttpResponse(content, content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = 'attachment; filename="relatorio_ekklesia.csv"'
    return response


@extend_schema(
    request=ConsolidationCardSerializer,
    responses={201: PersonSerializer},
    tags=['people'],
)
@api_view(['POST'])
def consolidation(request):
    serializer = ConsolidationCardSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    person = services.save_consolidation_card(**serializer.validated_data)
    return Response(PersonSerializer(person).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: OpenApiTypes.OBJECT},
    description="Churches offered by the registration forms.",
    tags=['people'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def churches(request):
    return Response(list(settings.CHURCHES))


@extend_schema(
    responses={200: OpenApiTypes.OBJECT, 404: ErrorResponseSerializer},
    description="Orders of a person that were not picked up yet.",
    tags=['people'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def person_orders(request, person_id):
    try:
        person = services.get_person(person_id)
    except PersonNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    orders = open_orders_for_person(person)
    return Response({
        'person_name': person.name,
        'orders': SaleSerializer(orders, many=True).data,
    })
