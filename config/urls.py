"""
URL configuration for stretto project
"""
from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods
from django.views.generic import RedirectView
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)


@require_http_methods(["GET"])
def health_view(request):
    """Minimal health check for connectivity verification. No auth required."""
    return JsonResponse({'status': 'ok', 'service': 'stretto'})


@require_http_methods(["GET"])
def system_health_view(request):
    """
    Full system health check for monitoring.
    Returns db and auth status. No auth required.
    """
    result = {'db': 'ok', 'auth': 'ok'}
    try:
        from django.db import connection
        connection.ensure_connection()
    except Exception as e:
        result['db'] = f'error: {str(e)[:80]}'
    try:
        from django.contrib.auth import get_user_model
        get_user_model().objects.exists()
    except Exception as e:
        result['auth'] = f'error: {str(e)[:80]}'
    return JsonResponse(result)


@require_http_methods(["GET"])
def api_root(request):
    """Root endpoint - API information"""
    return JsonResponse({
        'name': 'Stretto API',
        'version': '1.0.0',
        'description': 'Ensemble management: members, program years, auditions',
        'endpoints': {
            'health': '/api/health',
            'auth': '/api/auth/',
            'members': '/api/members',
            'programYears': '/api/program-years',
            'auditionDates': '/api/audition-dates',
            'auditionSlots': '/api/audition-slots',
            'publicAuditions': '/api/public/auditions/{auditionDateId}',
            'notifications': '/api/notifications/',
            'docs': '/api/docs',
            'schema': '/api/schema',
        }
    })


urlpatterns = [
    path('', api_root, name='api-root'),
    path('admin', RedirectView.as_view(url='/admin/', permanent=False)),
    path('admin/', admin.site.urls),
    path('api', api_root),
    path('api/', api_root),
    path('api/health', health_view, name='api-health'),
    path('api/system/health', system_health_view, name='api-system-health'),

    # API Schema
    path('api/schema', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),

    # API endpoints
    path('api/auth/', include('accounts.urls')),
    path('api/members', include('accounts.urls_members')),
    path('api/program-years', include('program_years.urls')),
    path('api/audition-dates', include('auditions.urls')),
    path('api/audition-slots', include('auditions.urls_slots')),
    path('api/public/auditions', include('auditions.urls_public')),
    path('api/notifications/', include('notifications.urls')),
]
