"""
URLs for program years (mounted at api/program-years, no trailing slash)
"""
from django.urls import path

from program_years import views

urlpatterns = [
    path('', views.program_years_view, name='program-years-list'),
    path('/<int:pk>', views.program_year_detail_view, name='program-year-detail'),
    path('/<int:pk>/archive', views.program_year_archive_view, name='program-year-archive'),
    path('/<int:pk>/activate', views.program_year_activate_view, name='program-year-activate'),
]
