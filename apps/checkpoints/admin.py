# ==========================================
# apps/checkpoints/admin.py
# ==========================================

from django.contrib import admin
from .models import Checkpoint, Movement, ManualEntry


@admin.register(Checkpoint)
class CheckpointAdmin(admin.ModelAdmin):
    list_display = ['name', 'category']
    list_filter = ['category']
    search_fields = ['name']


@admin.register(Movement)
class MovementAdmin(admin.ModelAdmin):
    list_display = ['person', 'checkpoint', 'timestamp']
    list_filter = ['checkpoint', 'timestamp']
    search_fields = ['person__name', 'person__email']
    raw_id_fields = ['person']
    date_hierarchy = 'timestamp'


@admin.register(ManualEntry)
class ManualEntryAdmin(admin.ModelAdmin):
    """Manual headcounts, with the spiritual outcomes reported by the rooms."""

    list_display = [
        'checkpoint',
        'type',
        'gender',
        'age_group',
        'quantity',
        'church',
        'is_salvation',
        'is_healing',
        'is_deliverance',
        'timestamp',
    ]
    list_filter = ['checkpoint', 'type', 'gender', 'age_group', 'is_salvation', 'timestamp']
    search_fields = ['church', 'marketing_source']
    date_hierarchy = 'timestamp'
