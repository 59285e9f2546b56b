"""
Admin configuration for accounts app
"""
from django import forms
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import ReadOnlyPasswordHashField, UserCreationForm

from .models import Member


def _validate_org_for_role(cleaned_data):
    if not cleaned_data.get('is_superuser') and not cleaned_data.get('organization'):
        raise forms.ValidationError(
            {'organization': 'Members must belong to an organization.'}
        )


class MemberAdminForm(forms.ModelForm):
    """
    Change form with proper password handling.
    Password is read-only (hash display only). Use the "Change password" link to set a new one.
    """
    password = ReadOnlyPasswordHashField(label='Password')

    class Meta:
        model = Member
        fields = '__all__'

    def clean(self):
        cleaned = super().clean()
        _validate_org_for_role(cleaned)
        return cleaned


class MemberAddForm(UserCreationForm):
    """Add form with org validation."""

    class Meta(UserCreationForm.Meta):
        model = Member
        fields = ('email', 'first_name', 'last_name', 'role', 'organization')

    def clean(self):
        cleaned = super().clean()
        _validate_org_for_role(cleaned)
        return cleaned


@admin.register(Member)
class MemberAdmin(BaseUserAdmin):
    form = MemberAdminForm
    add_form = MemberAddForm
    list_display = ['email', 'first_name', 'last_name', 'role', 'organization', 'is_active', 'date_joined']
    list_filter = ['role', 'is_active', 'notifications_enabled', 'organization']
    search_fields = ['email', 'first_name', 'last_name']
    ordering = ['last_name', 'first_name']
    readonly_fields = ['date_joined', 'updated_at', 'last_login']

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Personal Info', {'fields': ('first_name', 'last_name', 'role', 'organization')}),
        ('Status', {'fields': ('is_active', 'notifications_enabled', 'is_staff', 'is_superuser')}),
        ('Important dates', {'fields': ('last_login', 'date_joined', 'updated_at')}),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'first_name', 'last_name', 'role', 'organization', 'password1', 'password2'),
        }),
    )
