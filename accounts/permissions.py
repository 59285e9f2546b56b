"""
Custom permissions for role-based access
"""
from rest_framework import permissions


class IsAdmin(permissions.BasePermission):
    """Staff: role=Admin in an organization"""

    message = 'Admin access required'

    def has_permission(self, request, view):
        return bool(
            request.user and
            request.user.is_authenticated and
            request.user.organization_id is not None and
            request.user.is_admin
        )


class IsOrganizationMember(permissions.BasePermission):
    """Any authenticated member that belongs to an organization"""

    message = 'Organization membership required'

    def has_permission(self, request, view):
        return bool(
            request.user and
            request.user.is_authenticated and
            request.user.organization_id is not None
        )
