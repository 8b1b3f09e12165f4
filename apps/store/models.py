# ==========================================
# apps/store/models.py
# ==========================================

import os
import secrets
import string
import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from apps.people.models import PersonType, Gender

ORDER_CODE_LENGTH = 6
ORDER_CODE_ALPHABET = string.ascii_uppercase + string.digits


class SaleStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    PAID = 'PAID', 'Paid'
    DELIVERED = 'DELIVERED', 'Delivered'


class PaymentMethod(models.TextChoices):
    PIX = 'PIX', 'PIX'
    TRANSFER = 'TRANSFER', 'Transfer with proof'
    CASH = 'CASH', 'Cash'
    CARD = 'CARD', 'Card'


def generate_order_code():
    """Voucher code shown to the buyer, e.g. ``K7Q2ZD``."""
    return ''.join(secrets.choice(ORDER_CODE_ALPHABET) for _ in range(ORDER_CODE_LENGTH))


def proof_upload_to(instance, filename):
    """``proofs/proof-<timestamp>-<random><ext>``"""
    ext = os.path.splitext(filename)[1].lower()
    stamp = int(timezone.now().timestamp() * 1000)
    return f"proofs/proof-{stamp}-{secrets.randbelow(10**9)}{ext}"


class Product(models.Model):
    """Item sold at the store or the canteen."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default='')
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    # Free text on purpose: LOJA, CANTINA, FOOD...
    category = models.CharField(max_length=60, default='LOJA')
    image_url = models.URLField(max_length=500, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'products'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.price})"


class Sale(models.Model):
    """
    A sale at the store, also called order.

    Manual sales are PAID on creation. PIX and proof-of-payment orders start
    PENDING and become PAID once the gateway or a staff member confirms the
    payment. Staff mark them DELIVERED at pickup.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_code = models.CharField(
        max_length=ORDER_CODE_LENGTH,
        unique=True,
        default=generate_order_code,
    )
    # Billing id at the payment gateway
    external_id = models.CharField(max_length=120, unique=True, null=True, blank=True)

    checkpoint = models.ForeignKey(
        'checkpoints.Checkpoint',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sales'
    )
    person = models.ForeignKey(
        'people.Person',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sales'
    )

    payment_method = models.CharField(max_length=20, default=PaymentMethod.PIX)
    total = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    status = models.CharField(max_length=10, choices=SaleStatus.choices, default=SaleStatus.PENDING)

    buyer_name = models.CharField(max_length=200, blank=True, default='')
    buyer_type = models.CharField(max_length=10, choices=PersonType.choices, default=PersonType.VISITOR)
    buyer_gender = models.CharField(max_length=1, choices=Gender.choices, default=Gender.MALE)

    proof = models.FileField(upload_to=proof_upload_to, null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    paid_at = models.DateTimeField(null=True, blank=True)
    delivered_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'sales'
        indexes = [
            models.Index(fields=['status', 'created_at'], name='sales_status_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.order_code} - {self.total} ({self.status})"

    def mark_paid(self):
        self.status = SaleStatus.PAID
        self.paid_at = timezone.now()
        self.save(update_fields=['status', 'paid_at'])

    def mark_delivered(self):
        self.status = SaleStatus.DELIVERED
        self.delivered_at = timezone.now()
        self.save(update_fields=['status', 'delivered_at'])


class SaleItem(models.Model):
    """Line of a sale. Keeps the unit price paid at the time."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    sale = models.ForeignKey(Sale, on_delete=models.CASCADE, related_name='items')
    product = models.ForeignKey(
        Product,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sale_items'
    )
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    price = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        db_table = 'sale_items'

    def __str__(self):
        return f"{self.quantity}x {self.product or 'removed product'}"

    @property
    def subtotal(self):
        return self.price * self.quantity
