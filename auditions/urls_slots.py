"""
Staff slot URLs (mounted at api/audition-slots)
"""
from django.urls import path

from auditions.views import staff

urlpatterns = [
    path('', staff.audition_slots_view, name='audition-slots'),
    path('/<uuid:slot_id>/status', staff.slot_status_view, name='audition-slot-status'),
    path('/<uuid:slot_id>/notes', staff.slot_notes_view, name='audition-slot-notes'),
]
