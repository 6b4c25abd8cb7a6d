"""
URL configuration for the GBVMIS records backend.

Routes the Django admin, the ``/api`` endpoints of the records app,
health and Prometheus probes, and the OpenAPI documentation at
``/swagger/`` and ``/redoc/``.
"""
from django.contrib import admin
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

from records.views import health

api_info = openapi.Info(
    title="GBVMIS Records API",
    default_version='v1',
    description="Case, victim, suspect, forensic and police records for GBV case tracking.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('healthz', health.healthz, name='healthz'),
    path('', include('django_prometheus.urls')),
    path('api/', include('records.routers')),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
]

handler404 = 'records.views.health.not_found'
