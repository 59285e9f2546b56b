"""
Public sign-up URLs (mounted at api/public/auditions)
"""
from django.urls import path

from auditions.views import public

urlpatterns = [
    path('/<uuid:audition_date_id>', public.public_audition_date_view, name='public-audition-date'),
    path('/<uuid:slot_id>/signup', public.public_signup_view, name='public-audition-signup'),
]
