"""Members Management API URLs (mounted at api/members, no trailing slash)"""
from django.urls import path

from accounts.views.members import (
    member_deactivate_view,
    member_detail_view,
    members_list_or_create_view,
)

urlpatterns = [
    path('', members_list_or_create_view, name='members-list'),
    path('/<int:pk>', member_detail_view, name='member-detail'),
    path('/<int:pk>/deactivate', member_deactivate_view, name='member-deactivate'),
]
