# ==========================================
# apps/store/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Product, Sale, SaleItem, SaleStatus


class SaleItemInline(admin.TabularInline):
    """Inline admin for the lines of a sale."""
    model = SaleItem
    extra = 0
    fields = ['product', 'quantity', 'price']
    readonly_fields = ['price']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'price', 'created_at']
    list_filter = ['category']
    search_fields = ['name', 'description']
    ordering = ['name']


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    """
    Admin interface for store sales.

    Provides:
    - Sales listing with colored status
    - Inline sale items
    - Actions to confirm payment and pickup
    """

    list_display = [
        'order_code',
        'buyer_name',
        'payment_method',
        'total',
        'status_badge',
        'checkpoint',
        'created_at',
    ]
    list_filter = ['status', 'payment_method', 'buyer_type', 'created_at']
    search_fields = ['order_code', 'external_id', 'buyer_name', 'person__email']
    readonly_fields = ['id', 'order_code', 'external_id', 'created_at', 'paid_at', 'delivered_at']
    date_hierarchy = 'created_at'
    inlines = [SaleItemInline]
    actions = ['mark_as_paid', 'mark_as_delivered']

    fieldsets = (
        ('Order', {
            'fields': ('id', 'order_code', 'external_id', 'status', 'payment_method', 'total')
        }),
        ('Buyer', {
            'fields': ('person', 'buyer_name', 'buyer_type', 'buyer_gender', 'proof')
        }),
        ('Location', {
            'fields': ('checkpoint',)
        }),
        ('Timestamps', {
            'fields': ('created_at', 'paid_at', 'delivered_at'),
            'classes': ('collapse',)
        }),
    )

    def status_badge(self, obj):
        """Display sale status as colored badge."""
        colors = {
            SaleStatus.PENDING: ('#E5C49A', '#2C1810'),
            SaleStatus.PAID: ('#6B8E5E', 'white'),
            SaleStatus.DELIVERED: ('#A47449', 'white'),
        }
        bg, fg = colors.get(obj.status, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_status_display()
        )
    status_badge.short_description = 'Status'

    @admin.action(description='Mark selected pending sales as paid')
    def mark_as_paid(self, request, queryset):
        count = 0
        for sale in queryset.filter(status=SaleStatus.PENDING):
            sale.mark_paid()
            count += 1
        self.message_user(request, f'{count} sales marked as paid.')

    @admin.action(description='Mark selected paid sales as delivered')
    def mark_as_delivered(self, request, queryset):
        count = 0
        for sale in queryset.filter(status=SaleStatus.PAID):
            sale.mark_delivered()
            count += 1
        self.message_user(request, f'{count} sales delivered.')
