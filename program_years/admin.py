from django.contrib import admin

from .models import ProgramYear


@admin.register(ProgramYear)
class ProgramYearAdmin(admin.ModelAdmin):
    list_display = ['name', 'organization', 'start_date', 'end_date', 'is_current', 'is_archived']
    list_filter = ['organization', 'is_current', 'is_archived']
    search_fields = ['name']
    ordering = ['-start_date']
