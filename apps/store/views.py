import logging

from django.views.decorators.cache import never_cache
from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes, parser_classes
from rest_framework.parsers import MultiPartParser, FormParser, JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsEventStaff
from apps.accounts.serializers import ErrorResponseSerializer
from .exceptions import (
    GatewayError,
    InvalidOrderError,
    InvalidSaleTransitionError,
    PaymentCustomerError,
    ProductNotFoundError,
    SaleNotFoundError,
    WebhookAuthenticationError,
)
from .serializers import (
    ProductSerializer,
    ProductCreateSerializer,
    ProductFilterSerializer,
    SaleSerializer,
    PixOrderSerializer,
    PixOrderResponseSerializer,
    PaymentStatusResponseSerializer,
    ProofCheckoutSerializer,
    ProofCheckoutResponseSerializer,
)
from . import services

logger = logging.getLogger(__name__)


class ProductViewSet(viewsets.ViewSet):
    """
    Store catalogue.

    list: Public product list, optionally filtered by category
    create: Add a product (staff)
    destroy: Remove a product (staff)
    """

    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_permissions(self):
        if self.action == 'list':
            return [AllowAny()]
        return [IsEventStaff()]

    @extend_schema(
        parameters=[ProductFilterSerializer],
        responses={200: ProductSerializer(many=True)},
        tags=['products'],
    )
    def list(self, request):
        params = ProductFilterSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        products = services.list_products(params.validated_data['category'])
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(
        request=ProductCreateSerializer,
        responses={201: ProductSerializer},
        tags=['products'],
    )
    def create(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = services.create_product(**serializer.validated_data)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        responses={200: OpenApiTypes.OBJECT, 404: ErrorResponseSerializer},
        tags=['products'],
    )
    def destroy(self, request, pk=None):
        try:
            services.delete_product(pk)
        except ProductNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response({'success': True})


# =============================================================================
# PIX orders
# =============================================================================

@extend_schema(
    request=PixOrderSerializer,
    responses={
        201: PixOrderResponseSerializer,
        400: ErrorResponseSerializer,
        502: ErrorResponseSerializer,
    },
    description="Create an order paid with PIX. Answers with the PIX "
                "copy-paste code and its QR image.",
    tags=['orders'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def create_order(request):
    serializer = PixOrderSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data
    try:
        sale, pix_data = services.create_pix_order(
            name=data.get('name'),
            email=data.get('email'),
            phone=data.get('phone'),
            cpf=data.get('cpf'),
            items=data.get('items'),
            age=data.get('age'),
            church=data.get('church'),
            gender=data.get('gender') or None,
        )
    except (InvalidOrderError, PaymentCustomerError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except GatewayError as e:
        return Response({'error': str(e)}, status=status.HTTP_502_BAD_GATEWAY)

    return Response(
        {'sale': SaleSerializer(sale).data, 'pix_data': pix_data},
        status=status.HTTP_201_CREATED,
    )


@extend_schema(
    responses={200: PaymentStatusResponseSerializer},
    description="Polled by the payment page until the PIX is paid.",
    tags=['orders'],
)
@never_cache
@api_view(['GET'])
@permission_classes([AllowAny])
def check_status(request, payment_id):
    return Response(services.check_payment_status(payment_id))


@extend_schema(
    request=OpenApiTypes.OBJECT,
    parameters=[
        OpenApiParameter('webhookSecret', OpenApiTypes.STR, description='Shared secret'),
    ],
    responses={200: None, 401: ErrorResponseSerializer},
    description="Payment notifications from AbacatePay.",
    tags=['orders'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def gateway_webhook(request):
    try:
        services.handle_gateway_webhook(
            request.data,
            secret=request.query_params.get('webhookSecret'),
        )
    except WebhookAuthenticationError as e:
        logger.warning("Rejected gateway webhook: %s", e)
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

    return Response(status=status.HTTP_200_OK)


# =============================================================================
# Pickup
# =============================================================================

@extend_schema(
    request=None,
    responses={
        200: SaleSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    tags=['orders'],
)
@api_view(['PATCH'])
def deliver(request, sale_id):
    try:
        sale = services.deliver_sale(sale_id)
    except SaleNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InvalidSaleTransitionError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({'success': True, 'sale': SaleSerializer(sale).data})


@extend_schema(
    responses={200: SaleSerializer(many=True)},
    description="Paid orders waiting for pickup, oldest first.",
    tags=['orders'],
)
@api_view(['GET'])
def pending(request):
    return Response(SaleSerializer(services.pending_pickups(), many=True).data)


@extend_schema(
    responses={200: SaleSerializer, 404: ErrorResponseSerializer},
    description="Voucher lookup by order code.",
    tags=['orders'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def by_code(request, code):
    try:
        sale = services.get_sale_by_code(code)
    except SaleNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(SaleSerializer(sale).data)


# =============================================================================
# Checkout with proof of payment
# =============================================================================

@extend_schema(
    request={'multipart/form-data': ProofCheckoutSerializer},
    responses={200: ProofCheckoutResponseSerializer, 400: ErrorResponseSerializer},
    tags=['orders'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
@parser_classes([MultiPartParser, FormParser, JSONParser])
def proof_checkout(request):
    serializer = ProofCheckoutSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        sale = services.create_proof_order(**serializer.validated_data)
    except InvalidOrderError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'success': True,
        'order_code': sale.order_code,
        'person_id': sale.person_id,
    })


@extend_schema(
    responses={200: SaleSerializer(many=True)},
    description="Pending orders with a receipt to review, newest first.",
    tags=['orders'],
)
@api_view(['GET'])
def proofs(request):
    return Response(SaleSerializer(services.pending_proofs(), many=True).data)


@extend_schema(
    request=None,
    responses={200: SaleSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    tags=['orders'],
)
@api_view(['POST'])
def approve_proof(request, code):
    try:
        sale = services.approve_proof_order(code)
    except SaleNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InvalidSaleTransitionError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({'success': True, 'sale': SaleSerializer(sale).data})


@extend_schema(
    request=None,
    responses={200: OpenApiTypes.OBJECT, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    tags=['orders'],
)
@api_view(['POST'])
def reject_proof(request, code):
    try:
        services.reject_proof_order(code)
    except SaleNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InvalidSaleTransitionError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({'success': True})
