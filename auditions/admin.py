"""
Admin configuration for auditions app

Dates and their slots are created only through auditions.services, which
partitions the window and inserts both in one transaction. The admin can
review (status, notes) and nothing that would desync a date from its slots.
"""
from django.contrib import admin

from .models import AuditionDate, AuditionSlot


class AuditionSlotInline(admin.TabularInline):
    model = AuditionSlot
    extra = 0
    fields = ['slot_time', 'member', 'status', 'notes']
    readonly_fields = ['slot_time', 'member']
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(AuditionDate)
class AuditionDateAdmin(admin.ModelAdmin):
    list_display = ['date', 'start_time', 'end_time', 'block_length_minutes', 'program_year', 'organization']
    list_filter = ['organization', 'program_year']
    ordering = ['-date']
    readonly_fields = [
        'organization', 'program_year', 'date', 'start_time', 'end_time', 'block_length_minutes', 'created_at',
    ]
    inlines = [AuditionSlotInline]

    def has_add_permission(self, request):
        return False


@admin.register(AuditionSlot)
class AuditionSlotAdmin(admin.ModelAdmin):
    list_display = ['audition_date', 'slot_time', 'member', 'status']
    list_filter = ['status', 'organization']
    search_fields = ['member__email', 'member__first_name', 'member__last_name']
    readonly_fields = ['audition_date', 'organization', 'slot_time', 'member', 'updated_at']

    def has_add_permission(self, request):
        return False
