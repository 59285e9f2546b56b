"""
URLs for notifications app.
"""
from django.urls import path

from notifications.views import audition_announcement_view, audition_recipients_view

urlpatterns = [
    path('audition-recipients', audition_recipients_view, name='notifications-audition-recipients'),
    path('audition-announcement', audition_announcement_view, name='notifications-audition-announcement'),
]
