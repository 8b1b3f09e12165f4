# ==========================================
# apps/people/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Person, Role


@admin.register(Person)
class PersonAdmin(admin.ModelAdmin):
    """Admin interface for the people of the event."""

    list_display = [
        'name',
        'email',
        'phone',
        'type',
        'role_badge',
        'church',
        'age',
        'created_at',
    ]
    list_filter = ['type', 'role', 'gender', 'church', 'created_at']
    search_fields = ['name', 'email', 'phone']
    readonly_fields = ['id', 'created_at']
    date_hierarchy = 'created_at'
    actions = ['make_staff']

    fieldsets = (
        ('Identity', {
            'fields': ('id', 'name', 'email', 'phone', 'gender', 'age')
        }),
        ('Event', {
            'fields': ('type', 'role', 'church', 'department', 'marketing_source')
        }),
        ('Timestamps', {
            'fields': ('created_at',),
            'classes': ('collapse',)
        }),
    )

    def role_badge(self, obj):
        """Highlight staff members."""
        if obj.role == Role.STAFF:
            return format_html(
                '<span style="background: #6B8E5E; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">{}</span>',
                obj.get_role_display()
            )
        return obj.get_role_display()
    role_badge.short_description = 'Role'

    @admin.action(description='Grant staff access')
    def make_staff(self, request, queryset):
        updated = queryset.update(role=Role.STAFF)
        self.message_user(request, f'{updated} people promoted to staff.')
