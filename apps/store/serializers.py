from rest_framework import serializers

from apps.people.models import PersonType, Gender
from apps.people.serializers import PersonMinimalSerializer
from .models import Product, Sale, SaleItem
from .services.cart import MAX_ITEM_QUANTITY


# =============================================================================
# Input Serializers
# =============================================================================

class ProductFilterSerializer(serializers.Serializer):
    category = serializers.CharField(required=False, allow_blank=True, default='')


class ProductCreateSerializer(serializers.ModelSerializer):
    """Validate a new catalogue product."""

    category = serializers.CharField(required=False, allow_blank=True, max_length=60)

    class Meta:
        model = Product
        fields = ['name', 'description', 'price', 'category', 'image_url']


class CartItemSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_ITEM_QUANTITY)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)


class ManualSaleSerializer(serializers.Serializer):
    """
    Validate a counter sale.

    ``buyer_type`` is limited to MEMBER and VISITOR, the only types the
    counter screen offers.
    """

    checkpoint_id = serializers.UUIDField()
    payment_method = serializers.CharField(max_length=20)
    buyer_type = serializers.ChoiceField(
        choices=[PersonType.MEMBER, PersonType.VISITOR],
        default=PersonType.VISITOR
    )
    buyer_gender = serializers.ChoiceField(choices=Gender.choices, default=Gender.MALE)
    items = CartItemSerializer(many=True, allow_empty=False)


class PixOrderSerializer(serializers.Serializer):
    """
    Validate the PIX checkout form.

    Presence of the buyer data and the CPF check digits are checked by the
    service, which answers with a single error message. ``items`` may come
    as a list or as a JSON string.
    """

    name = serializers.CharField(required=False, allow_blank=True, max_length=200)
    email = serializers.CharField(required=False, allow_blank=True, max_length=255)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=32)
    cpf = serializers.CharField(required=False, allow_blank=True, max_length=20)
    age = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    church = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=120)
    gender = serializers.ChoiceField(choices=Gender.choices, required=False, allow_blank=True)
    items = serializers.JSONField(required=False)


class ProofCheckoutSerializer(serializers.Serializer):
    """Validate the multipart checkout with proof of payment."""

    name = serializers.CharField(max_length=200)
    phone = serializers.CharField(max_length=32)
    items = serializers.CharField()
    email = serializers.EmailField(required=False, allow_blank=True)
    age = serializers.CharField(required=False, allow_blank=True)
    church = serializers.CharField(required=False, allow_blank=True, max_length=120)
    proof = serializers.FileField(required=False, allow_null=True)


# =============================================================================
# Output Serializers
# =============================================================================

class ProductSerializer(serializers.ModelSerializer):
    """Main serializer for catalogue products."""

    class Meta:
        model = Product
        fields = ['id', 'name', 'description', 'price', 'category', 'image_url', 'created_at']
        read_only_fields = fields


class SaleItemSerializer(serializers.ModelSerializer):
    product = ProductSerializer(read_only=True)

    class Meta:
        model = SaleItem
        fields = ['id', 'product', 'quantity', 'price']
        read_only_fields = fields


class SaleSerializer(serializers.ModelSerializer):
    """Sale with items, products and buyer."""

    items = SaleItemSerializer(many=True, read_only=True)
    person = PersonMinimalSerializer(read_only=True)
    proof_url = serializers.SerializerMethodField()

    class Meta:
        model = Sale
        fields = [
            'id',
            'order_code',
            'external_id',
            'checkpoint',
            'person',
            'payment_method',
            'total',
            'status',
            'buyer_name',
            'buyer_type',
            'buyer_gender',
            'proof_url',
            'items',
            'created_at',
            'paid_at',
            'delivered_at',
        ]
        read_only_fields = fields

    def get_proof_url(self, obj):
        return obj.proof.url if obj.proof else None


class PixDataSerializer(serializers.Serializer):
    payment_id = serializers.CharField()
    copy_paste = serializers.CharField(allow_null=True)
    qr_code = serializers.CharField(allow_null=True)


class PixOrderResponseSerializer(serializers.Serializer):
    sale = SaleSerializer()
    pix_data = PixDataSerializer()


class PaymentStatusResponseSerializer(serializers.Serializer):
    status = serializers.CharField()
    order_code = serializers.CharField(required=False)


class ProofCheckoutResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    order_code = serializers.CharField()
    person_id = serializers.UUIDField()
