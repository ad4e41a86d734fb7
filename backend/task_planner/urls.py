"""
URL configuration for task_planner project.
"""

from django.urls import path, include
from django.http import JsonResponse
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView


def home_view(request):
    """Root endpoint with API information."""
    return JsonResponse({
        'message': 'Welcome to Task Planner API',
        'version': '1.0.0',
        'endpoints': {
            'API Root': '/api/',
            'Sample Matrix': 'GET /api/tasks/list/',
            'Classify Tasks': 'POST /api/tasks/classify/',
            'Create Task': 'POST /api/tasks/create/',
            'Schedule Tasks': 'POST /api/tasks/schedule/',
            'API Documentation': '/api/docs/',
            'OpenAPI Schema': '/api/schema/',
        }
    })


urlpatterns = [
    path('', home_view, name='home'),
    path('api/', include('planning.urls')),
    # OpenAPI/Swagger Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
]
