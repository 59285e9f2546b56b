"""
Staff audition URLs (mounted at api/audition-dates, no trailing slash)
"""
from django.urls import path

from auditions.views import staff

urlpatterns = [
    path('', staff.audition_dates_view, name='audition-dates'),
    path('/<uuid:pk>', staff.audition_date_detail_view, name='audition-date-detail'),
    path('/<uuid:audition_date_id>/slots/<uuid:slot_id>/status', staff.slot_status_view,
         name='audition-date-slot-status'),
    path('/<uuid:audition_date_id>/slots/<uuid:slot_id>/notes', staff.slot_notes_view,
         name='audition-date-slot-notes'),
]
