# ==========================================
# apps/meetings/admin.py
# ==========================================

from django.contrib import admin
from .models import Meeting, GlobalConfig


@admin.register(Meeting)
class MeetingAdmin(admin.ModelAdmin):
    list_display = ['title', 'date', 'type', 'created_by']
    list_filter = ['type', 'date']
    search_fields = ['title', 'notes', 'created_by']
    date_hierarchy = 'date'


@admin.register(GlobalConfig)
class GlobalConfigAdmin(admin.ModelAdmin):
    list_display = ['key', 'value']
    search_fields = ['key']
