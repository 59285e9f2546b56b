"""
Serializers for accounts app
"""
from django.contrib.auth import authenticate
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed

from accounts.models import Member


class MemberSerializer(serializers.ModelSerializer):
    """Member serializer for API responses"""
    firstName = serializers.CharField(source='first_name', read_only=True)
    lastName = serializers.CharField(source='last_name', read_only=True)
    fullName = serializers.CharField(source='full_name', read_only=True)
    isActive = serializers.BooleanField(source='is_active', read_only=True)
    notificationsEnabled = serializers.BooleanField(source='notifications_enabled', read_only=True)

    class Meta:
        model = Member
        fields = ['id', 'firstName', 'lastName', 'fullName', 'email', 'role', 'isActive', 'notificationsEnabled']
        read_only_fields = fields


class MeSerializer(MemberSerializer):
    """Current member, with tenant info for the admin console header"""
    organizationId = serializers.IntegerField(source='organization_id', read_only=True)
    organizationName = serializers.CharField(source='organization.name', read_only=True, default='')

    class Meta(MemberSerializer.Meta):
        fields = MemberSerializer.Meta.fields + ['organizationId', 'organizationName']
        read_only_fields = fields


class MemberWriteSerializer(serializers.Serializer):
    """Create / update body for staff member management"""
    firstName = serializers.CharField(max_length=100)
    lastName = serializers.CharField(max_length=100)
    email = serializers.EmailField(max_length=200)
    role = serializers.CharField(max_length=20)
    isActive = serializers.BooleanField(required=False, default=True)
    notificationsEnabled = serializers.BooleanField(required=False, allow_null=True, default=None)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True, min_length=8)


class LoginSerializer(serializers.Serializer):
    """Login serializer"""
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})

    def validate(self, attrs):
        member = authenticate(
            request=self.context.get('request'),
            email=attrs['email'],
            password=attrs['password'],
        )
        if member is None:
            # AuthenticationFailed -> 401 (inactive accounts included)
            raise AuthenticationFailed('Invalid email or password, or account is inactive.')
        attrs['member'] = member
        return attrs


class ChangePasswordSerializer(serializers.Serializer):
    currentPassword = serializers.CharField(write_only=True)
    newPassword = serializers.CharField(write_only=True, min_length=8)
