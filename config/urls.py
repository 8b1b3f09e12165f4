"""
URL configuration for the event back-office API.

Public and staff endpoints live under /api/; see /api/docs/ for the
OpenAPI documentation.
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenRefreshView

from config.views import health_check

urlpatterns = [
    # Health check
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('api/auth/', include('apps.accounts.urls')),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # API endpoints
    path('api/people/', include('apps.people.urls')),
    path('api/operations/', include('apps.checkpoints.urls')),
    path('api/products/', include('apps.store.product_urls')),
    path('api/orders/', include('apps.store.urls')),
    path('api/meetings/', include('apps.meetings.urls')),
    path('api/dashboard/', include('apps.dashboard.urls')),
]

# Uploaded proofs (development only)
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
